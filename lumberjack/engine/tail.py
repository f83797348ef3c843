"""
Tail Controller Module - Keep polling for new events until cancelled

Handles:
- Advancing the window start past the newest event already shown
- Emitting new lines without a results header
- Surviving failed polls (reported inline, polling continues)
- Prompt cancellation (flag checked before and after each sleep)
"""
import logging
from dataclasses import dataclass
from threading import Event
from typing import Callable, Optional

from lumberjack.store.base import LogStore

from .errors import FetchError
from .fetcher import fetch_events

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 3.0


@dataclass
class TailState:
    """Newest event timestamp observed so far; never moves backwards"""
    last_seen_ts: Optional[int] = None

    def observe(self, timestamp: Optional[int]) -> None:
        if timestamp is None:
            return
        if self.last_seen_ts is None or timestamp > self.last_seen_ts:
            self.last_seen_ts = timestamp

    def next_start(self, fallback_start_ms: int) -> int:
        if self.last_seen_ts is None:
            return fallback_start_ms
        return self.last_seen_ts + 1


class TailController:
    """
    Poll the store for new events with an advancing window

    Two states: polling, and stopped once the cancellation flag is seen.
    Each poll covers ``[last_seen_ts + 1, now)`` where "now" is left open so
    the store answers up to its own current time.
    """

    def __init__(
        self,
        store: LogStore,
        group: str,
        pattern: str,
        start_ms: int,
        stop_event: Event,
        on_line: Callable[[str], None],
        on_error: Callable[[str], None],
        state: Optional[TailState] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        """
        Args:
            store: Remote log store
            group: Log group being tailed
            pattern: Compiled filter pattern
            start_ms: Start of the original window, used until an event is seen
            stop_event: Session cancellation flag
            on_line: Called with each new formatted line
            on_error: Called with a message when a poll fails
            state: Tail state seeded by the initial fetch
            poll_interval: Seconds to wait between polls
        """
        self.store = store
        self.group = group
        self.pattern = pattern
        self.start_ms = start_ms
        self.stop_event = stop_event
        self.on_line = on_line
        self.on_error = on_error
        self.state = state or TailState()
        self.poll_interval = poll_interval
        self.polls = 0

    def poll_once(self) -> int:
        """Run one poll; returns the number of lines emitted"""
        window_start = self.state.next_start(self.start_ms)
        self.polls += 1

        try:
            result = fetch_events(self.store, self.group, window_start, None, self.pattern)
        except FetchError as e:
            logger.warning(f"Tail poll {self.polls} on {self.group} failed: {e.cause}")
            self.on_error(f"[tail error] {e.cause}")
            return 0

        for line in result.lines:
            self.on_line(line)
        self.state.observe(result.last_timestamp)
        return len(result.lines)

    def run(self) -> None:
        """Poll until the stop event is set"""
        logger.info(f"Tailing {self.group} every {self.poll_interval}s")

        while not self.stop_event.is_set():
            self.poll_once()

            if self.stop_event.is_set():
                break
            # wait() returns early as soon as the flag is set
            self.stop_event.wait(self.poll_interval)

        logger.info(f"Tail on {self.group} stopped after {self.polls} poll(s)")
