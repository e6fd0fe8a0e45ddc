"""Response formatting helpers shared by services."""

from datetime import datetime

from app.models.common import unix_to_utc
from app.services.cache import utcnow


def iso(dt: datetime | None) -> str | None:
    """Naive UTC datetime -> ISO-8601 with a Z suffix."""
    if dt is None:
        return None
    return dt.isoformat(timespec="milliseconds") + "Z"


def iso_now() -> str:
    return iso(utcnow())


def iso_from_unix(ts: int | None) -> str | None:
    return iso(unix_to_utc(ts))
