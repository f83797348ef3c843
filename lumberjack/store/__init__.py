"""
Log Store Package - Remote log store interface and adapters

Package Structure:
- base: LogStore protocol and data types (RawEvent, EventPage)
- cloudwatch: AWS CloudWatch Logs adapter (CloudWatchLogStore)
"""
from .base import EventPage, LogStore, RawEvent
from .cloudwatch import CloudWatchLogStore

__all__ = [
    'EventPage',
    'LogStore',
    'RawEvent',
    'CloudWatchLogStore',
]
