from datetime import datetime, timezone


def get_current_utc() -> datetime:
    """Wall-clock now as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """
    Naive datetimes are read as UTC.
    Aware datetimes are returned unchanged.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
