from .models import Entry, LogLevel


class PollTrace(Entry, kw_only=True):
    resource: str
    attempt: int
    elapsed: float
    level: LogLevel = LogLevel.TRACE

class PollInfo(Entry, kw_only=True):
    resource: str
    attempt: int
    elapsed: float
    level: LogLevel = LogLevel.INFO

class PollError(Entry, kw_only=True):
    resource: str
    attempt: int
    elapsed: float
    error: str
    level: LogLevel = LogLevel.ERROR

class WatchTrace(Entry, kw_only=True):
    resource: str
    event_type: str
    events_seen: int
    level: LogLevel = LogLevel.TRACE

class WatchInfo(Entry, kw_only=True):
    resource: str
    event_type: str
    events_seen: int
    level: LogLevel = LogLevel.INFO

class VerifyInfo(Entry, kw_only=True):
    kind: str
    identifier: str
    level: LogLevel = LogLevel.INFO

class VerifyError(Entry, kw_only=True):
    kind: str
    identifier: str
    error: str
    level: LogLevel = LogLevel.ERROR
