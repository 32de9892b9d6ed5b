from .config import LoggingConfig, StreamType
from .converge_logging_models import (
    PollError,
    PollInfo,
    PollTrace,
    VerifyError,
    VerifyInfo,
    WatchInfo,
    WatchTrace,
)
from .models import Entry, Log, LogLevel, LogLevelName
from .streams import Logger, LoggerContext, LoggerStream

__all__ = [
    "Entry",
    "Log",
    "LogLevel",
    "LogLevelName",
    "Logger",
    "LoggerContext",
    "LoggerStream",
    "LoggingConfig",
    "PollError",
    "PollInfo",
    "PollTrace",
    "StreamType",
    "VerifyError",
    "VerifyInfo",
    "WatchInfo",
    "WatchTrace",
]
