"""
Log Store Interface Module - What the engine needs from a remote log store

The engine only ever talks to a store through ``LogStore``; the CloudWatch
adapter is one implementation and tests supply in-memory fakes.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Protocol


@dataclass(frozen=True)
class RawEvent:
    """One event as delivered by the store"""
    timestamp_ms: int
    message: str


@dataclass
class EventPage:
    """One page of query results plus the cursor for the next page"""
    events: List[RawEvent] = field(default_factory=list)
    next_cursor: Optional[str] = None


class LogStore(Protocol):
    """Remote, paginated log store"""

    def list_groups(self) -> List[str]:
        ...

    def query_events(
        self,
        group: str,
        start_ms: int,
        end_ms: Optional[int],
        pattern: str,
        cursor: Optional[str] = None,
    ) -> EventPage:
        ...
