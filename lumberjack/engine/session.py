"""
Search Session Module - One in-flight query at a time, streamed to the UI

Handles:
- Spawning one background worker thread per search
- Streaming results to the UI over a per-session ordered queue
- Cancelling the previous session when a new one starts
- Handing off from the initial fetch into tail polling

The worker never touches UI state; the UI drains ``ResultLine`` values with
``SearchCoordinator.drain()`` and stops at the ``DONE`` marker.
"""
import itertools
import logging
import queue
import time
from dataclasses import dataclass
from enum import Enum
from threading import Event, Lock, Thread
from typing import Callable, List, Optional

from lumberjack.store.base import LogStore

from .errors import ClientInitError, FetchError, TimeParseError
from .fetcher import fetch_events
from .filter_compiler import compile_filter
from .tail import DEFAULT_POLL_INTERVAL, TailController, TailState
from .time_resolver import resolve_window

logger = logging.getLogger(__name__)


def now_ms() -> int:
    """Current wall-clock time in milliseconds"""
    return time.time_ns() // 1_000_000


class LineKind(Enum):
    """Kinds of values on a session's result stream"""
    LINE = "line"
    HEADER = "header"
    ERROR = "error"
    DONE = "done"


@dataclass(frozen=True)
class ResultLine:
    """One value on the result stream"""
    kind: LineKind
    text: str
    session_id: int

    @property
    def is_done(self) -> bool:
        return self.kind is LineKind.DONE


class SearchSession:
    """State of one logical query"""

    def __init__(self, session_id: int, group: str, start_spec: str, end_spec: str,
                 raw_filter: str, tail: bool):
        self.session_id = session_id
        self.group = group
        self.start_spec = start_spec
        self.end_spec = end_spec
        self.raw_filter = raw_filter
        self.pattern = compile_filter(raw_filter)
        self.tail = tail

        self.stop_event = Event()
        self.results: "queue.Queue[ResultLine]" = queue.Queue()
        self.tail_state = TailState()
        self.start_ms: Optional[int] = None
        self.end_ms: Optional[int] = None
        self.thread: Optional[Thread] = None
        self.finished = False

    @property
    def cancelled(self) -> bool:
        return self.stop_event.is_set()

    def cancel(self) -> None:
        self.stop_event.set()

    def emit(self, kind: LineKind, text: str = "") -> None:
        self.results.put(ResultLine(kind, text, self.session_id))

    def emit_line(self, text: str) -> None:
        self.emit(LineKind.LINE, text)

    def emit_error(self, text: str) -> None:
        self.emit(LineKind.ERROR, text)

    def finish(self) -> None:
        self.finished = True
        self.emit(LineKind.DONE)


class SearchCoordinator:
    """
    Owns the lifecycle of the current search session

    Features:
    - start(): cancel the current session and spawn a fresh worker
    - stop(): request cancellation without waiting
    - drain(): non-blocking read of the current session's output
    """

    def __init__(
        self,
        store_factory: Callable[[], LogStore],
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        clock: Callable[[], int] = now_ms,
    ):
        """
        Args:
            store_factory: Builds the store client; may raise ClientInitError
            poll_interval: Seconds between tail polls
            clock: Source of "now" in milliseconds
        """
        self.store_factory = store_factory
        self.poll_interval = poll_interval
        self.clock = clock

        self.current: Optional[SearchSession] = None
        self._ids = itertools.count(1)
        self._lock = Lock()

    @property
    def is_active(self) -> bool:
        session = self.current
        return session is not None and session.thread is not None and not session.finished

    def start(self, group: str, start_spec: str, end_spec: str, filter_text: str,
              tail: bool = False) -> SearchSession:
        """
        Start a new search, superseding any current one

        Args:
            group: Log group to query
            start_spec: Start time expression
            end_spec: End time expression
            filter_text: Filter as typed by the user
            tail: Keep polling for new events after the initial fetch

        Returns:
            The new current session
        """
        with self._lock:
            previous = self.current
            if previous is not None:
                previous.cancel()
                logger.info(f"Session {previous.session_id} superseded")

            session = SearchSession(next(self._ids), group, start_spec, end_spec, filter_text, tail)
            self.current = session

            session.thread = Thread(
                target=self._run_session,
                args=(session,),
                name=f"search-{session.session_id}",
                daemon=True,
            )
            session.thread.start()

        logger.info(
            f"Session {session.session_id} started: group={group} start={start_spec!r} "
            f"end={end_spec!r} pattern={session.pattern!r} tail={tail}"
        )
        return session

    def stop(self) -> None:
        """Request cancellation of the current session; does not wait"""
        session = self.current
        if session is not None:
            session.cancel()
            logger.info(f"Stop requested for session {session.session_id}")

    def drain(self, limit: Optional[int] = None) -> List[ResultLine]:
        """
        Take queued output of the current session without blocking

        Args:
            limit: Maximum number of values to take (None = all queued)

        Returns:
            ResultLine values in the order the worker produced them
        """
        session = self.current
        if session is None:
            return []

        drained = []
        while limit is None or len(drained) < limit:
            try:
                line = session.results.get_nowait()
            except queue.Empty:
                break
            if line.session_id == session.session_id:
                drained.append(line)
        return drained

    def list_groups(self) -> List[str]:
        """Names of all log groups in the store, sorted"""
        return sorted(self.store_factory().list_groups())

    def shutdown(self, timeout: float = 2.0) -> None:
        """Cancel the current session and wait briefly for its worker"""
        session = self.current
        if session is None:
            return
        session.cancel()
        if session.thread and session.thread.is_alive():
            session.thread.join(timeout=timeout)

    def _run_session(self, session: SearchSession) -> None:
        """Worker body - runs in the session's own thread"""
        try:
            self._search(session)
        except Exception as e:
            logger.error(f"Session {session.session_id} crashed: {e}", exc_info=True)
            session.emit_error(f"[search error] {e}")
        finally:
            session.finish()
            logger.info(f"Session {session.session_id} finished")

    def _search(self, session: SearchSession) -> None:
        try:
            store = self.store_factory()
        except ClientInitError as e:
            session.emit_error(f"[client error] {e}")
            return

        try:
            session.start_ms, session.end_ms = resolve_window(
                session.start_spec, session.end_spec, self.clock()
            )
        except TimeParseError as e:
            session.emit_error(f"[time error] {e}")
            return

        try:
            result = fetch_events(store, session.group, session.start_ms, session.end_ms,
                                  session.pattern)
        except FetchError as e:
            session.emit_error(f"[search error] {e.cause}")
            if not session.tail:
                return
        else:
            session.emit(LineKind.HEADER, f"--- {len(result.lines)} results ---")
            for line in result.lines:
                session.emit_line(line)
            session.tail_state.observe(result.last_timestamp)

        if not session.tail:
            return

        TailController(
            store,
            session.group,
            session.pattern,
            session.start_ms,
            session.stop_event,
            on_line=session.emit_line,
            on_error=session.emit_error,
            state=session.tail_state,
            poll_interval=self.poll_interval,
        ).run()
