"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH

MEMORY = ":memory:"


def db_exists(path: str = DB_PATH) -> bool:
    """Check if database file exists."""
    return path == MEMORY or Path(path).exists()


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized")


class Database:
    """Process-level DuckDB connection handing out one cursor per thread.

    Constructed at application startup and closed at shutdown. Storage
    calls run in worker threads, each of which gets its own cursor.
    """

    def __init__(self, path: str = DB_PATH):
        self.path = path
        self._conn: duckdb.DuckDBPyConnection | None = None
        self._cursors: list[duckdb.DuckDBPyConnection] = []
        self._generation = 0
        self._local = threading.local()
        self._lock = threading.Lock()

    def connect(self) -> duckdb.DuckDBPyConnection:
        """Open the connection and create tables on first use."""
        with self._lock:
            if self._conn is None:
                if not db_exists(self.path):
                    logger.warning("DB not found: {}. Creating empty DB.", self.path)
                self._conn = duckdb.connect(self.path)
                init_tables(self._conn)
                self._generation += 1
                logger.debug("DB connected: {}", self.path)
            return self._conn

    def cursor(self) -> duckdb.DuckDBPyConnection:
        """Get the calling thread's cursor."""
        conn = self.connect()
        if getattr(self._local, "generation", None) != self._generation:
            with self._lock:
                self._local.cursor = conn.cursor()
                self._local.generation = self._generation
                self._cursors.append(self._local.cursor)
        return self._local.cursor

    def close(self) -> None:
        """Close every cursor and the connection."""
        with self._lock:
            for cur in self._cursors:
                cur.close()
            self._cursors.clear()
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.debug("DB connection closed")

    def reconnect(self) -> duckdb.DuckDBPyConnection:
        """Force reconnect."""
        self.close()
        return self.connect()
