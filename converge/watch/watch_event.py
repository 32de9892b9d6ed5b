from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class EventType(Enum):
    ADDED = "ADDED"
    MODIFIED = "MODIFIED"
    DELETED = "DELETED"
    BOOKMARK = "BOOKMARK"
    ERROR = "ERROR"


@dataclass(slots=True, frozen=True)
class WatchEvent:
    type: EventType
    object: Any

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WatchEvent:
        event_type = data.get("type")
        if event_type is None:
            raise ValueError("Watch event requires 'type'")

        return cls(
            type=EventType(str(event_type).upper()),
            object=data.get("object"),
        )
