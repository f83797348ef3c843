"""
Event Formatter Module - Render raw store events as display text

Handles:
- Millisecond timestamps rendered as RFC 3339 (UTC)
- Embedded JSON payloads pretty-printed under the message prefix
- Graceful fallback for out-of-range timestamps and malformed JSON
"""
import json
from datetime import datetime, timedelta, timezone
from typing import Optional

from lumberjack.store.base import RawEvent

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def format_timestamp(timestamp_ms: int) -> str:
    """Render milliseconds since the epoch, or the raw number if out of range"""
    try:
        dt = EPOCH + timedelta(milliseconds=timestamp_ms)
    except (OverflowError, ValueError, TypeError):
        return str(timestamp_ms)

    timespec = "milliseconds" if timestamp_ms % 1000 else "seconds"
    return dt.isoformat(timespec=timespec)


def pretty_json(text: str) -> Optional[str]:
    """Pretty-print text if it is a JSON object or array, else None"""
    trimmed = text.lstrip()
    if not trimmed.startswith(("{", "[")):
        return None

    try:
        value = json.loads(trimmed)
    except (ValueError, RecursionError):
        # Too deeply nested to decode is treated like any other malformed payload
        return None

    return json.dumps(value, indent=2, ensure_ascii=False)


def format_event(event: RawEvent) -> str:
    """
    Format a single event for the results pane

    Args:
        event: Raw event from the store

    Returns:
        Display text, possibly spanning several lines
    """
    ts = format_timestamp(event.timestamp_ms)
    message = event.message.rstrip()

    brace = message.find("{")
    if brace == -1:
        return f"{ts} {message}"

    pretty = pretty_json(message[brace:])
    if pretty is None:
        return f"{ts} {message}"

    return f"{ts}{message[:brace]}\n{pretty}"
