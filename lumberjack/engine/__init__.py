"""
Query/Tail Engine Package - From user input to a stream of display lines

Package Structure:
- time_resolver: Relative/absolute time expressions (resolve_time, resolve_window)
- filter_compiler: Shorthand filter translation (compile_filter)
- event_formatter: Event rendering with JSON pretty-printing (format_event)
- fetcher: Paginated retrieval for one window (fetch_events)
- tail: Advancing-window polling (TailController, TailState)
- session: Session lifecycle and result streaming (SearchCoordinator)
- errors: Typed engine failures
"""
from .errors import ClientInitError, FetchError, LumberjackError, TimeParseError
from .time_resolver import resolve_time, resolve_window
from .filter_compiler import compile_filter
from .event_formatter import format_event, pretty_json
from .fetcher import FetchResult, fetch_events
from .tail import TailController, TailState
from .session import LineKind, ResultLine, SearchCoordinator, SearchSession

__all__ = [
    # Errors
    'LumberjackError',
    'TimeParseError',
    'FetchError',
    'ClientInitError',

    # Pure translation
    'resolve_time',
    'resolve_window',
    'compile_filter',
    'format_event',
    'pretty_json',

    # Retrieval
    'FetchResult',
    'fetch_events',
    'TailController',
    'TailState',

    # Sessions
    'LineKind',
    'ResultLine',
    'SearchCoordinator',
    'SearchSession',
]
