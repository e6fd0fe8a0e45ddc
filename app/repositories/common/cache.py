"""Cache repository - generic keyed storage for every resource kind."""

import json
from datetime import datetime
from typing import Any

from loguru import logger

from app.models import ALL_TABLES, CacheEntry, CacheTable
from app.repositories.base import BaseRepository


class CacheRepository(BaseRepository):
    """Upsert / fresh-lookup / delete over CacheTable descriptors."""

    def _row_values(self, table: CacheTable, key: str, payload: Any, updated_at: datetime) -> dict:
        values = dict(zip(table.key_columns, table.split_key(key), strict=True))
        values.update(table.describe(payload))
        values["data"] = json.dumps(payload)
        values["last_updated"] = updated_at
        return values

    def _upsert_sql(self, table: CacheTable, columns: list[str]) -> str:
        placeholders = ", ".join("?" for _ in columns)
        return f"INSERT OR REPLACE INTO {table.name} ({', '.join(columns)}) VALUES ({placeholders})"

    def _key_filter(self, table: CacheTable) -> str:
        return " AND ".join(f"{c} = ?" for c in table.key_columns)

    def _to_entry(self, table: CacheTable, row: tuple) -> CacheEntry:
        n = len(table.key_columns)
        return CacheEntry(
            key=table.join_key(row[:n]),
            payload=json.loads(row[n]),
            last_updated=row[n + 1],
        )

    def upsert(self, table: CacheTable, key: str, payload: Any, updated_at: datetime) -> None:
        """Insert or overwrite one entry."""
        values = self._row_values(table, key, payload, updated_at)
        self.execute(self._upsert_sql(table, list(values)), list(values.values()))
        logger.debug("Cache saved: table={}, key={}", table.name, key)

    def upsert_many(self, table: CacheTable, entries: list[tuple[str, Any]], updated_at: datetime) -> None:
        """Insert or overwrite several entries sharing one timestamp."""
        if not entries:
            return
        rows = [self._row_values(table, key, payload, updated_at) for key, payload in entries]
        columns = list(rows[0])
        self.executemany(self._upsert_sql(table, columns), [[r.get(c) for c in columns] for r in rows])
        logger.debug("Cache saved: table={}, entries={}", table.name, len(rows))

    def find_fresh(self, table: CacheTable, key: str, fresh_after: datetime) -> CacheEntry | None:
        """Entry for key if it was written after `fresh_after`."""
        columns = ", ".join([*table.key_columns, "data", "last_updated"])
        row = self.fetchone(
            f"SELECT {columns} FROM {table.name} WHERE {self._key_filter(table)} AND last_updated > ?",
            [*table.split_key(key), fresh_after],
        )
        if row is None:
            return None
        logger.debug("Cache hit: table={}, key={}", table.name, key)
        return self._to_entry(table, row)

    def find_many_fresh(
        self,
        table: CacheTable,
        fresh_after: datetime,
        where: str = "",
        params: list | None = None,
        order_by: str | None = None,
        limit: int | None = None,
    ) -> list[CacheEntry]:
        """All entries matching `where` written after `fresh_after`."""
        columns = ", ".join([*table.key_columns, "data", "last_updated"])
        query = f"SELECT {columns} FROM {table.name} WHERE last_updated > ?"
        if where:
            query += f" AND ({where})"
        if order_by:
            query += f" ORDER BY {order_by}"
        if limit is not None:
            query += f" LIMIT {int(limit)}"
        rows = self.fetchall(query, [fresh_after, *(params or [])])
        return [self._to_entry(table, r) for r in rows]

    def delete(self, table: CacheTable, key: str) -> None:
        """Remove one entry."""
        self.execute(f"DELETE FROM {table.name} WHERE {self._key_filter(table)}", list(table.split_key(key)))
        logger.debug("Cache entry deleted: table={}, key={}", table.name, key)

    def clear(self, table: CacheTable | None = None) -> None:
        """Remove every entry of one table, or of all tables."""
        for t in [table] if table else ALL_TABLES:
            self.execute(f"DELETE FROM {t.name}")
            logger.info("Cache cleared: {}", t.name)

    def stats(self) -> list[dict]:
        """Row count and newest write per table."""
        result = []
        for t in ALL_TABLES:
            count, newest = self.fetchone(f"SELECT COUNT(*), MAX(last_updated) FROM {t.name}")
            result.append({"table": t.name, "rows": int(count), "last_updated": newest})
        return result
