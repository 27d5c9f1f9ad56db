"""UTC timestamps.

DuckDB ``TIMESTAMP`` columns store naive values; the app keeps every stored
timestamp in UTC and hands out timezone-aware datetimes.
"""

from datetime import datetime, timezone
from typing import Any, Optional


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Attach or convert to UTC.

    Naive values are taken to already be UTC (that is how they are stored).
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_db_param(value: Any) -> Any:
    """Aware datetimes become naive UTC for ``TIMESTAMP`` columns; other values pass through."""
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value
