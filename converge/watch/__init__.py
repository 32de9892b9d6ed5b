from .watch_converger import Predicate, WatchConverger, watch_until
from .watch_event import EventType, WatchEvent

__all__ = [
    "EventType",
    "Predicate",
    "WatchConverger",
    "WatchEvent",
    "watch_until",
]
