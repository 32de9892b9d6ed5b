"""
Strict decoding of raw status documents.

Status payloads arrive from the control plane as untyped mappings (or
JSON text). They are converted in a single step onto a typed status
struct so that a malformed document is rejected as a whole instead of
being read field by field with silent defaults.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

import msgspec

from converge.errors import DecodeError

from .condition import Condition
from .resource_status import ResourceStatus

S = TypeVar("S", bound=ResourceStatus)

StatusDocument = Mapping[str, Any] | bytes | str


def extract_status(
    raw: StatusDocument | None,
    status_type: type[S] = ResourceStatus,
) -> S:
    """
    Decode a raw status document onto ``status_type``.

    A missing document (an object the controller has not reconciled yet)
    decodes as an empty status with no conditions.

    Args:
        raw: Mapping as returned by the control plane, or JSON bytes/str
        status_type: Concrete status struct to decode onto

    Returns:
        A fully populated instance of ``status_type``

    Raises:
        DecodeError: If a required field is missing or a value has the
            wrong type
    """
    if raw is None:
        return status_type()

    try:
        if isinstance(raw, (bytes, str)):
            return msgspec.json.decode(raw, type=status_type)

        if not isinstance(raw, Mapping):
            raise DecodeError(
                f"expected a mapping, got {type(raw).__name__}",
                status_type.__name__,
            )

        return msgspec.convert(dict(raw), type=status_type)

    except (msgspec.ValidationError, msgspec.DecodeError) as err:
        raise DecodeError(str(err), status_type.__name__) from err


def extract_conditions(raw: StatusDocument | None) -> list[Condition]:
    return extract_status(raw, ResourceStatus).conditions
