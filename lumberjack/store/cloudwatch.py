"""
CloudWatch Logs Store Module - boto3 adapter for the LogStore interface

Handles:
- Session/client creation for a region and optional named profile
- Paginated log group listing
- Single-page filter_log_events requests (pagination is driven by the fetcher)
"""
import logging
from typing import List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from lumberjack.engine.errors import ClientInitError

from .base import EventPage, RawEvent

logger = logging.getLogger(__name__)

DEFAULT_REGION = "eu-west-1"


class CloudWatchLogStore:
    """LogStore backed by AWS CloudWatch Logs"""

    def __init__(self, region: Optional[str] = None, profile: Optional[str] = None, client=None):
        """
        Create the boto3 session and logs client

        Args:
            region: AWS region (falls back to the profile's region, then eu-west-1)
            profile: Named AWS profile, or None for the default credential chain
            client: Pre-built logs client (used by tests)

        Raises:
            ClientInitError: If the profile or region cannot be set up
        """
        self.profile = profile

        if client is not None:
            self.client = client
            self.region = region or DEFAULT_REGION
            return

        try:
            session = boto3.session.Session(profile_name=profile, region_name=region)
            self.region = region or session.region_name or DEFAULT_REGION
            self.client = session.client(
                "logs",
                region_name=self.region,
                config=Config(retries={"max_attempts": 3, "mode": "standard"}),
            )
        except BotoCoreError as e:
            logger.error(f"Could not create CloudWatch Logs client (profile={profile}, region={region}): {e}")
            raise ClientInitError(f"Could not set up AWS client: {e}") from e

        logger.info(f"CloudWatch Logs client ready (profile={profile}, region={self.region})")

    def list_groups(self) -> List[str]:
        """Return all log group names, sorted"""
        names = []
        paginator = self.client.get_paginator("describe_log_groups")
        for page in paginator.paginate():
            for group in page.get("logGroups", []):
                name = group.get("logGroupName")
                if name:
                    names.append(name)

        names.sort()
        logger.info(f"Listed {len(names)} log groups")
        return names

    def query_events(
        self,
        group: str,
        start_ms: int,
        end_ms: Optional[int],
        pattern: str,
        cursor: Optional[str] = None,
    ) -> EventPage:
        """Request one page of filtered events"""
        kwargs = dict(logGroupName=group, startTime=start_ms)
        if end_ms is not None:
            kwargs["endTime"] = end_ms
        if pattern.strip():
            kwargs["filterPattern"] = pattern
        if cursor:
            kwargs["nextToken"] = cursor

        resp = self.client.filter_log_events(**kwargs)

        events = [
            RawEvent(
                timestamp_ms=event.get("timestamp", 0),
                message=event.get("message", ""),
            )
            for event in resp.get("events", [])
        ]
        return EventPage(events=events, next_cursor=resp.get("nextToken"))
