"""Common models - base classes and cache descriptors."""

from app.models.common.cache import (
    ANALYTICS_CACHE_DDL,
    ANALYTICS_CACHE_TABLE,
    KEY_SEPARATOR,
    CacheEntry,
    CacheTable,
    unix_to_utc,
)

__all__ = [
    "CacheEntry",
    "CacheTable",
    "KEY_SEPARATOR",
    "ANALYTICS_CACHE_DDL",
    "ANALYTICS_CACHE_TABLE",
    "unix_to_utc",
]
