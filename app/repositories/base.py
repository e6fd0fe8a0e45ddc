"""Base repository over the shared Database."""

from typing import Any

from loguru import logger

from app.repositories.db import Database


class BaseRepository:
    """Thin SQL helpers; every call runs on the calling thread's cursor."""

    def __init__(self, db: Database):
        self._db = db
        logger.debug("{} initialized", self.__class__.__name__)

    def execute(self, query: str, params: list | None = None) -> Any:
        cursor = self._db.cursor()
        return cursor.execute(query, params) if params else cursor.execute(query)

    def executemany(self, query: str, rows: list[list]) -> None:
        """Run `query` once per parameter row (no-op without rows)."""
        if rows:
            self._db.cursor().executemany(query, rows)

    def fetchall(self, query: str, params: list | None = None) -> list:
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        return self.execute(query, params).fetchone()

    def scalar(self, query: str, params: list | None = None) -> Any:
        """First column of the first row, or None."""
        row = self.fetchone(query, params)
        return row[0] if row else None
