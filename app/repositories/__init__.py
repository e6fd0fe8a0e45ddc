"""Repositories package - data access layer for the cache database."""

from app.repositories.analytics import AnalyticsRepository
from app.repositories.base import BaseRepository
from app.repositories.common import CacheRepository
from app.repositories.db import MEMORY, Database, db_exists, init_tables

__all__ = [
    # DB
    "Database",
    "MEMORY",
    "db_exists",
    "init_tables",
    # Base
    "BaseRepository",
    # Common
    "CacheRepository",
    # Analytics
    "AnalyticsRepository",
]
