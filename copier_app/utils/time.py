"""
Time utilities for signal timestamps and id generation.
"""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(ts: Optional[datetime] = None) -> str:
    """
    Format a timestamp as ISO-8601 with millisecond precision and a Z suffix.

    Args:
        ts: Timestamp to format, defaults to now

    Returns:
        String like 2024-01-01T12:00:00.123Z
    """
    if ts is None:
        ts = utc_now()
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)

    ts = ts.astimezone(timezone.utc)
    return ts.strftime("%Y-%m-%dT%H:%M:%S.") + f"{ts.microsecond // 1000:03d}Z"


def to_epoch_ms(ts: datetime) -> int:
    """Convert a datetime to milliseconds since the Unix epoch."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return int(ts.timestamp() * 1000)
