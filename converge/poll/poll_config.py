from dataclasses import dataclass

from .fetch_error_policy import FetchErrorPolicy


@dataclass(slots=True)
class PollConfig:
    """Cadence, deadline and fetch error policy for one poll loop."""

    interval: float = 2.0  # seconds
    timeout: float = 180.0  # seconds
    fetch_error_policy: FetchErrorPolicy = FetchErrorPolicy.FATAL

    def __post_init__(self) -> None:
        if self.interval <= 0:
            raise ValueError(f"Poll interval must be positive, got {self.interval}")

        if self.timeout < 0:
            raise ValueError(f"Poll timeout must not be negative, got {self.timeout}")
