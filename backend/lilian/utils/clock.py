from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current UTC time as a naive datetime.

    Timestamp columns are declared as plain ``DateTime`` (no timezone) and
    hold naive UTC, so values read back from SQLite compare cleanly with
    freshly created ones.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize a possibly tz-aware datetime to the naive UTC form used in storage."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
