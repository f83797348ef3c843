"""
Log Fetcher Module - Paginated retrieval for one fixed window

Handles:
- Driving the store's cursor until it is exhausted
- Guarding against stores that hand back the same cursor forever
- Formatting every event and tracking the newest timestamp seen

The fetcher is stateless; a one-shot search and every tail poll call it with
their own window.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from lumberjack.store.base import LogStore

from .errors import FetchError
from .event_formatter import format_event

logger = logging.getLogger(__name__)


@dataclass
class FetchResult:
    """Formatted lines of one fetch plus the newest event timestamp"""
    lines: List[str] = field(default_factory=list)
    last_timestamp: Optional[int] = None


def fetch_events(
    store: LogStore,
    group: str,
    start_ms: int,
    end_ms: Optional[int],
    pattern: str,
) -> FetchResult:
    """
    Fetch every page of events for a window

    Args:
        store: Remote log store
        group: Log group to query
        start_ms: Window start in milliseconds
        end_ms: Window end in milliseconds, or None for "up to now"
        pattern: Compiled filter pattern ("" for no filter)

    Returns:
        FetchResult with lines in store order

    Raises:
        FetchError: On the first failed page request (no retries)
    """
    result = FetchResult()
    cursor: Optional[str] = None
    pages = 0

    while True:
        try:
            page = store.query_events(group, start_ms, end_ms, pattern, cursor)
        except Exception as e:
            logger.error(f"Fetch from {group} failed after {pages} page(s): {e}")
            raise FetchError(group, e) from e

        pages += 1
        for event in page.events:
            result.lines.append(format_event(event))
            if result.last_timestamp is None or event.timestamp_ms > result.last_timestamp:
                result.last_timestamp = event.timestamp_ms

        next_cursor = page.next_cursor or None
        if next_cursor is None or next_cursor == cursor:
            break
        cursor = next_cursor

    logger.debug(
        f"Fetched {len(result.lines)} events from {group} "
        f"[{start_ms}, {end_ms}] in {pages} page(s)"
    )
    return result
