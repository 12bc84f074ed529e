from datetime import datetime, timezone


def as_utc(value: datetime | str | None) -> datetime | None:
    """Normalise to an aware UTC datetime. Naive values are taken as UTC."""
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
