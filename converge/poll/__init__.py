from .fetch_error_policy import FetchErrorPolicy, FetchErrorPolicyName
from .poll_config import PollConfig
from .poll_converger import Fetch, PollConverger, StatusClassifier, poll_until

__all__ = [
    "Fetch",
    "FetchErrorPolicy",
    "FetchErrorPolicyName",
    "PollConfig",
    "PollConverger",
    "StatusClassifier",
    "poll_until",
]
