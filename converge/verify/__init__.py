from .check_outcome import CheckOutcome, ResourceLookupError, ResourceNotFoundError
from .resource_check import Lookup, ResourceCheck
from .resource_kind import ResourceKind
from .verification_report import VerificationReport
from .verifier import ResourceVerifier, verify_all

__all__ = [
    "CheckOutcome",
    "Lookup",
    "ResourceCheck",
    "ResourceKind",
    "ResourceLookupError",
    "ResourceNotFoundError",
    "ResourceVerifier",
    "VerificationReport",
    "verify_all",
]
