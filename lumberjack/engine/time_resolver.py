"""
Time Resolver Module - Turn user-entered time expressions into instants

Handles:
- Empty expressions (default lookback for start, "now" for end)
- Relative expressions: -30s, -5m, -1h, -2d, -90 (seconds)
- Absolute expressions: RFC 3339 with offset, or "YYYY-MM-DD HH:MM:SS" (UTC)

All functions take an explicit ``now_ms`` so a start/end pair resolves
against the same reference instant and nothing here reads the clock.
"""
from datetime import datetime, timezone
from typing import Tuple

from .errors import TimeParseError

DEFAULT_LOOKBACK_MS = 15 * 60 * 1000

UNIT_MULTIPLIERS = {
    "": 1000,
    "s": 1000,
    "m": 60 * 1000,
    "h": 60 * 60 * 1000,
    "d": 24 * 60 * 60 * 1000,
}

# Instants are signed 64-bit milliseconds on the wire
I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1
I64_DIGITS = len(str(I64_MAX))

SIMPLE_FORMAT = "%Y-%m-%d %H:%M:%S"

_ACCEPTED_FORMATS = (
    "Use either:\n"
    "- relative: -30s, -5m, -1h, -2d\n"
    "- RFC3339: 2025-12-11T10:00:00Z\n"
    "- Simple:  2025-12-11 10:00:00"
)


def _to_ms(dt: datetime) -> int:
    delta = dt.astimezone(timezone.utc) - datetime(1970, 1, 1, tzinfo=timezone.utc)
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def _resolve_relative(spec: str, body: str, now_ms: int) -> int:
    digits = 0
    while digits < len(body) and body[digits] in "0123456789":
        digits += 1

    num, unit = body[:digits], body[digits:]
    if not num:
        raise TimeParseError(spec, f"Invalid relative time '{spec}': missing number")

    multiplier = UNIT_MULTIPLIERS.get(unit)
    if multiplier is None:
        raise TimeParseError(
            spec,
            f"Invalid relative time unit '{unit}' in '{spec}'. Allowed units: s, m, h, d",
        )

    # More digits than any signed 64-bit value has can never fit
    significant = num.lstrip("0") or "0"
    if len(significant) > I64_DIGITS:
        raise TimeParseError(spec, f"Relative time '{spec}' is too large")

    offset = int(significant) * multiplier
    result = now_ms - offset
    if offset > I64_MAX or result < I64_MIN:
        raise TimeParseError(spec, f"Relative time '{spec}' is too large")
    return result


def _resolve_absolute(spec: str) -> int:
    text = spec
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        dt = None

    if dt is not None and dt.tzinfo is not None:
        try:
            return _to_ms(dt)
        except OverflowError:
            raise TimeParseError(spec, f"Datetime '{spec}' is out of range") from None

    try:
        naive = datetime.strptime(spec, SIMPLE_FORMAT)
    except ValueError:
        raise TimeParseError(spec, f"Invalid datetime '{spec}'. {_ACCEPTED_FORMATS}") from None

    return _to_ms(naive.replace(tzinfo=timezone.utc))


def resolve_time(spec: str, now_ms: int, is_end: bool = False) -> int:
    """
    Resolve a time expression to milliseconds since the epoch

    Args:
        spec: The raw expression typed by the user
        now_ms: Reference "now" in milliseconds
        is_end: Whether this is the end of the window (empty means now)

    Returns:
        Instant in milliseconds

    Raises:
        TimeParseError: If the expression cannot be resolved
    """
    text = spec.strip()

    if not text:
        return now_ms if is_end else now_ms - DEFAULT_LOOKBACK_MS

    if text.startswith("-"):
        return _resolve_relative(text, text[1:], now_ms)

    return _resolve_absolute(text)


def resolve_window(start_spec: str, end_spec: str, now_ms: int) -> Tuple[int, int]:
    """Resolve a start/end pair against one reference instant"""
    start_ms = resolve_time(start_spec, now_ms)
    end_ms = resolve_time(end_spec, now_ms, is_end=True)
    return start_ms, end_ms
