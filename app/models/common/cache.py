"""Cache table descriptors and the generic cache entry."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

# Separator between the parts of a composite cache key
KEY_SEPARATOR = ":"


def _no_columns(_payload: Any) -> dict[str, Any]:
    return {}


def unix_to_utc(ts: int | None) -> datetime | None:
    """Unix seconds -> naive UTC datetime (the storage convention)."""
    if ts is None:
        return None
    return datetime.fromtimestamp(ts, UTC).replace(tzinfo=None)


@dataclass(frozen=True)
class CacheTable:
    """Storage layout of one resource kind.

    Every table holds its key column(s), a `data` JSON payload and
    `last_updated`. `describe` derives the descriptive columns (slot,
    owner, supply...) from a payload so they can be filtered and indexed.
    String keys map onto key columns by splitting on KEY_SEPARATOR.
    """

    name: str
    ddl: str
    key_columns: tuple[str, ...]
    key_types: tuple[type, ...] = (str,)
    describe: Callable[[Any], dict[str, Any]] = field(default=_no_columns)

    def __post_init__(self):
        if len(self.key_columns) != len(self.key_types):
            raise ValueError(f"{self.name}: key_columns and key_types differ in length")

    def split_key(self, key: str) -> tuple:
        """Cache key -> key column values."""
        n = len(self.key_columns)
        parts = key.rsplit(KEY_SEPARATOR, n - 1) if n > 1 else [key]
        if len(parts) != n:
            raise ValueError(f"{self.name}: key {key!r} does not have {n} parts")
        return tuple(t(p) for t, p in zip(self.key_types, parts, strict=True))

    def join_key(self, values: tuple | list) -> str:
        """Key column values -> cache key."""
        return KEY_SEPARATOR.join(str(v) for v in values)


@dataclass(frozen=True)
class CacheEntry:
    """One cached object of a resource kind."""

    key: str
    payload: Any
    last_updated: datetime


ANALYTICS_CACHE_DDL = """
CREATE TABLE IF NOT EXISTS analytics_cache (
    cache_key VARCHAR PRIMARY KEY,
    data JSON NOT NULL,
    last_updated TIMESTAMP NOT NULL
)
"""

ANALYTICS_CACHE_TABLE = CacheTable(
    name="analytics_cache",
    ddl=ANALYTICS_CACHE_DDL,
    key_columns=("cache_key",),
)
