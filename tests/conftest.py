import threading
import time

import pytest

from lumberjack.store.base import EventPage, RawEvent


class FakeLogStore:
    """In-memory LogStore that replays scripted pages and records every call"""

    def __init__(self, pages=None, groups=None, error=None):
        # pages: list of (events, next_cursor); events are (ts, message) pairs
        self.pages = list(pages or [])
        self.groups = list(groups or [])
        self.error = error
        self.calls = []
        self._lock = threading.Lock()

    def list_groups(self):
        return list(self.groups)

    def query_events(self, group, start_ms, end_ms, pattern, cursor=None):
        with self._lock:
            self.calls.append((group, start_ms, end_ms, pattern, cursor))
            if self.error is not None:
                raise self.error
            if not self.pages:
                return EventPage()
            events, next_cursor = self.pages.pop(0)
        return EventPage(
            events=[RawEvent(ts, message) for ts, message in events],
            next_cursor=next_cursor,
        )


def wait_for_done(coordinator, timeout=5.0):
    """Drain the coordinator until the DONE marker arrives"""
    collected = []
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        for line in coordinator.drain():
            collected.append(line)
            if line.is_done:
                return collected
        time.sleep(0.01)
    raise AssertionError(f"session did not finish; got {collected!r}")


@pytest.fixture
def fake_store():
    return FakeLogStore()
