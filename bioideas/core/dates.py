"""Date parsing utilities."""

import time
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional


def now_utc() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def from_struct_time(value: time.struct_time) -> datetime:
    """feedparser's *_parsed fields are already normalized to UTC."""
    return datetime(*value[:6], tzinfo=timezone.utc)


def from_timestamp(value, default: Optional[datetime] = None) -> Optional[datetime]:
    """Epoch seconds (int/float/numeric string) to UTC datetime."""
    try:
        return datetime.fromtimestamp(float(value), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return default


def parse_datetime(value: str, default: Optional[datetime] = None) -> Optional[datetime]:
    """
    Parse the date strings found in feeds and APIs.

    Accepts ISO 8601 (``2025-01-15``, ``2025-01-15T08:30:00Z``) and RFC 822
    (``Wed, 15 Jan 2025 08:30:00 GMT``). Naive results are assumed UTC.

    Args:
        value: Date string to parse
        default: Returned when the string is empty or unparseable

    Returns:
        Timezone-aware datetime or default
    """
    if not value or not isinstance(value, str):
        return default
    text = value.strip()

    dt = None
    try:
        dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        try:
            dt = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError):
            dt = None

    if dt is None:
        return default
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt
