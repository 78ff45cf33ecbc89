"""Datetime utilities."""

from datetime import datetime, timezone
from typing import Optional


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with millisecond precision and a Z suffix."""
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """Return the current (or given) time as an ISO-8601 UTC timestamp."""
    return format_timestamp(now or datetime.now(timezone.utc))
