"""Read-through cache manager.

Serves `(kind, key)` from storage while the row is fresh, otherwise calls
the upstream fetch, returns its result and writes it back in the
background. Write-back never blocks or fails the caller; storage read
errors degrade to a miss; fetch errors propagate unchanged and write
nothing. Misses are not deduplicated: concurrent misses may fetch the same
key twice and the storage upsert decides the last write.
"""

import asyncio
import threading
from collections.abc import Awaitable, Callable
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import UTC, datetime, timedelta
from typing import Any

from loguru import logger

from app.models import CacheEntry, CacheTable
from app.repositories.common import CacheRepository
from app.services.cache.policy import POLICIES, CachePolicy, ResourceKind
from settings import CACHE_WRITE_WORKERS

Fetch = Callable[[], Awaitable[Any]]


def utcnow() -> datetime:
    """Naive UTC now (the storage convention)."""
    return datetime.now(UTC).replace(tzinfo=None)


class ReadThroughCache:
    """Read-through cache over CacheRepository with background write-back."""

    def __init__(
        self,
        repo: CacheRepository,
        *,
        policies: dict[ResourceKind, CachePolicy] = POLICIES,
        clock: Callable[[], datetime] = utcnow,
        write_workers: int = CACHE_WRITE_WORKERS,
    ):
        self._repo = repo
        self._policies = policies
        self._clock = clock
        self._executor = ThreadPoolExecutor(max_workers=write_workers, thread_name_prefix="cache-write")
        self._pending: set[Future] = set()
        self._pending_lock = threading.Lock()
        logger.debug("ReadThroughCache initialized: {} kinds, {} write workers", len(policies), write_workers)

    @property
    def clock(self) -> Callable[[], datetime]:
        return self._clock

    def policy(self, kind: ResourceKind) -> CachePolicy:
        return self._policies[kind]

    def _fresh_after(self, policy: CachePolicy, ttl: timedelta | None) -> datetime:
        ttl = policy.ttl if ttl is None else ttl
        if ttl <= timedelta(0):
            raise ValueError(f"ttl must be positive, got {ttl}")
        return self._clock() - ttl

    async def resolve(self, kind: ResourceKind, key: str, fetch: Fetch, ttl: timedelta | None = None) -> Any:
        """Fresh payload for (kind, key), fetching upstream on miss.

        `ttl` comes last so it can default to the kind's policy TTL.
        """
        policy = self.policy(kind)
        fresh_after = self._fresh_after(policy, ttl)

        entry = await self._lookup(policy.table, key, fresh_after)
        if entry is not None:
            logger.debug("Cache hit: kind={}, key={}", kind.value, key)
            return entry.payload

        logger.debug("Cache miss: kind={}, key={}", kind.value, key)
        value = await fetch()
        self._schedule_write(policy.table, [(key, value)])
        return value

    async def resolve_many(
        self,
        kind: ResourceKind,
        fetch: Fetch,
        key_of: Callable[[Any], str],
        *,
        where: str = "",
        params: list | None = None,
        order_by: str | None = None,
        limit: int | None = None,
        ttl: timedelta | None = None,
    ) -> list:
        """Fresh rows matching `where`, or a fetched list written back one row per item."""
        policy = self.policy(kind)
        fresh_after = self._fresh_after(policy, ttl)

        try:
            entries = await asyncio.to_thread(
                self._repo.find_many_fresh, policy.table, fresh_after, where, params, order_by, limit
            )
        except Exception as e:
            logger.warning("Cache read failed for {} (treating as miss): {}", kind.value, e)
            entries = []

        if entries:
            logger.debug("Cache hit: kind={}, rows={}", kind.value, len(entries))
            return [e.payload for e in entries]

        logger.debug("Cache miss: kind={}", kind.value)
        items = await fetch()
        self._schedule_write(policy.table, [(key_of(item), item) for item in items])
        return items

    async def invalidate(self, kind: ResourceKind, key: str) -> None:
        """Drop one cached entry."""
        await asyncio.to_thread(self._repo.delete, self.policy(kind).table, key)

    async def clear(self, kind: ResourceKind | None = None) -> None:
        """Drop every entry of a kind, or of all kinds."""
        table = self.policy(kind).table if kind else None
        await asyncio.to_thread(self._repo.clear, table)

    async def _lookup(self, table: CacheTable, key: str, fresh_after: datetime) -> CacheEntry | None:
        try:
            return await asyncio.to_thread(self._repo.find_fresh, table, key, fresh_after)
        except Exception as e:
            logger.warning("Cache read failed for {}:{} (treating as miss): {}", table.name, key, e)
            return None

    # Background write-back

    def _schedule_write(self, table: CacheTable, entries: list[tuple[str, Any]]) -> None:
        if not entries:
            return
        try:
            future = self._executor.submit(self._write, table, entries, self._clock())
        except RuntimeError as e:
            logger.warning("Cache write-back skipped for {} ({} rows): {}", table.name, len(entries), e)
            return
        with self._pending_lock:
            self._pending.add(future)
        future.add_done_callback(self._write_done)

    def _write(self, table: CacheTable, entries: list[tuple[str, Any]], updated_at: datetime) -> None:
        if len(entries) == 1:
            key, payload = entries[0]
            self._repo.upsert(table, key, payload, updated_at)
        else:
            self._repo.upsert_many(table, entries, updated_at)

    def _write_done(self, future: Future) -> None:
        with self._pending_lock:
            self._pending.discard(future)
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.opt(exception=exc).error("Cache write-back failed: {}", exc)

    @property
    def pending_writes(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for scheduled writes to finish."""
        with self._pending_lock:
            futures = list(self._pending)
        pending = [asyncio.wrap_future(f) for f in futures]
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    async def close(self) -> None:
        """Drain pending writes and stop the write-back pool."""
        await self.drain()
        self._executor.shutdown(wait=True)
        logger.debug("ReadThroughCache closed")
