"""UTC helpers. All domain timestamps are timezone-aware UTC."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Normalize a stored timestamp to aware UTC.

    Naive values (SQLite drops the offset) are taken to be UTC already;
    aware values in another zone are converted.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
