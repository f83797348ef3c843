"""
Engine Errors Module - Typed failures raised by the query/tail engine

Handles:
- Time expression parse failures
- Remote fetch failures (carry the group and underlying cause)
- Remote client setup failures (credentials, profile, region)
"""
from typing import Optional


class LumberjackError(Exception):
    """Base class for all Lumberjack errors"""


class TimeParseError(LumberjackError, ValueError):
    """A start/end time expression could not be resolved"""

    def __init__(self, spec: str, reason: str):
        self.spec = spec
        self.reason = reason
        super().__init__(reason)


class FetchError(LumberjackError):
    """A page request against the remote store failed"""

    def __init__(self, group: str, cause: Optional[BaseException] = None):
        self.group = group
        self.cause = cause
        super().__init__(f"fetching '{group}' failed: {cause}")


class ClientInitError(LumberjackError):
    """The remote client could not be created"""
