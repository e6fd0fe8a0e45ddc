"""Analytics service - RPC aggregates and aggregates over the cache tables."""

import asyncio
import math
from datetime import date, datetime, time, timedelta

from loguru import logger

from app.errors import InvalidKeyError
from app.repositories.analytics import PERIODS, AnalyticsRepository
from app.services.analytics.aggregations import (
    average_slot_time_ms,
    program_activity,
    success_rate,
)
from app.services.cache import ReadThroughCache, ResourceKind, analytics_key
from app.services.formatting import iso, iso_now
from app.validation import clamp_limit
from rpc_client import ChainClient
from rpc_client.chain.schemas import EpochInfoSchema, SupplySchema, average_tps

# Throughput treated as full load
MAX_TPS = 5000
DEFAULT_RANGE_DAYS = 7
PROGRAM_PERIODS = {"day": timedelta(days=1), "week": timedelta(days=7), "month": timedelta(days=30)}
EPOCH = datetime(1970, 1, 1)


def _parse_date(value: str | None, default: date) -> date:
    if not value:
        return default
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise InvalidKeyError(f"Invalid date: {value}", details="Expected YYYY-MM-DD") from None


def date_range(start: str | None, end: str | None, today: date) -> tuple[datetime, datetime]:
    """Inclusive day range -> [start 00:00, end 23:59:59.999]."""
    first = _parse_date(start, today - timedelta(days=DEFAULT_RANGE_DAYS))
    last = _parse_date(end, today)
    return (
        datetime.combine(first, time.min),
        datetime.combine(last, time(23, 59, 59, 999000)),
    )


def active_wallets_estimate(total_wallets: int, transaction_count: int) -> int:
    return max(math.floor(total_wallets * 0.1), math.floor(transaction_count * 0.0001), 100)


def _supply(raw: dict) -> dict:
    supply = SupplySchema.model_validate(raw)
    return {
        "total": supply.total,
        "circulating": supply.circulating,
        "nonCirculating": supply.non_circulating,
    }


class AnalyticsService:
    """Network analytics for dashboards."""

    def __init__(self, client: ChainClient, cache: ReadThroughCache, repo: AnalyticsRepository, clock=None):
        self._client = client
        self._cache = cache
        self._repo = repo
        self._clock = clock or cache.clock
        logger.debug("AnalyticsService initialized")

    async def _db(self, fn, *args):
        return await asyncio.to_thread(fn, *args)

    async def overview(self) -> dict:
        """Chain totals, cached-data counts and network health in one payload."""

        async def compute() -> dict:
            tx_count, slot, supply, epoch, samples = await asyncio.gather(
                self._client.get_transaction_count(),
                self._client.get_slot(),
                self._client.get_supply(),
                self._client.get_epoch_info(),
                self._client.get_recent_performance_samples(3),
            )
            day_ago = self._clock() - timedelta(days=1)
            wallets = await self._db(self._repo.count_accounts)
            tx_today = await self._db(self._repo.count_transactions_since, day_ago)
            tokens = await self._db(self._repo.token_totals)
            recent = await self._db(self._repo.transactions_since, day_ago)
            epoch_info = EpochInfoSchema.model_validate(epoch)

            return {
                "totalTransactions": tx_count,
                "totalWallets": wallets,
                "totalTokenVolume": tokens["total_volume"],
                "activeWalletsToday": active_wallets_estimate(wallets, tx_count),
                "transactionsToday": tx_today,
                "currentSlot": slot,
                "tokenCount": tokens["count"],
                "networkHealth": {
                    "tps": average_tps(samples),
                    "successRate": success_rate([r["data"] for r in recent]),
                    "blockTime": average_slot_time_ms(samples),
                    "epoch": epoch_info.epoch,
                    "epochProgress": epoch_info.progress,
                },
                "supply": _supply(supply),
                "metadata": {
                    "dataSource": "mixed",
                    "estimatedValues": ["activeWalletsToday"],
                    "lastUpdated": iso_now(),
                    "rpcStatus": "connected",
                },
            }

        return await self._cache.resolve(ResourceKind.ANALYTICS, analytics_key("overview"), compute)

    async def network_health(self) -> dict:
        async def compute() -> dict:
            slot, epoch, samples, supply = await asyncio.gather(
                self._client.get_slot(),
                self._client.get_epoch_info(),
                self._client.get_recent_performance_samples(5),
                self._client.get_supply(),
            )
            epoch_info = EpochInfoSchema.model_validate(epoch)
            tps = average_tps(samples)
            return {
                "currentSlot": slot,
                "tps": tps,
                "epochInfo": {
                    "epoch": epoch_info.epoch,
                    "slotIndex": epoch_info.slot_index,
                    "slotsInEpoch": epoch_info.slots_in_epoch,
                    "progress": epoch_info.progress,
                },
                "supply": _supply(supply),
                "performance": {
                    "avgBlockTime": average_slot_time_ms(samples),
                    "networkLoad": round(tps / MAX_TPS, 4),
                },
                "metadata": {"dataSource": "rpc", "lastUpdated": iso_now(), "rpcStatus": "connected"},
            }

        return await self._cache.resolve(ResourceKind.ANALYTICS, analytics_key("network_health"), compute)

    async def transaction_timeseries(
        self,
        period: str | None = None,
        start: str | None = None,
        end: str | None = None,
        limit: int | None = None,
    ) -> dict:
        """Cached transactions per period bucket; unknown periods fall back to days."""
        period = period if period in PERIODS else "day"
        limit = clamp_limit(limit, default=30, maximum=100)
        first, last = date_range(start, end, self._clock().date())
        rows = await self._db(self._repo.transaction_timeseries, period, first, last, limit)
        return {
            "data": [
                {
                    "timestamp": iso(r["timestamp"]),
                    "total": r["total"],
                    "successful": r["successful"],
                    "failed": r["failed"],
                    "successRate": r["successful"] / r["total"] if r["total"] else 0,
                }
                for r in rows
            ],
            "metadata": {
                "period": period,
                "from": iso(first),
                "to": iso(last),
                "totalDataPoints": len(rows),
                "dataSource": "database",
            },
        }

    async def user_timeseries(self, period: str | None = None, start: str | None = None, end: str | None = None) -> dict:
        """Accounts seen per hour or day."""
        period = "hour" if period == "hour" else "day"
        first, last = date_range(start, end, self._clock().date())
        rows = await self._db(self._repo.account_timeseries, period, first, last)
        return {
            "data": [{"timestamp": iso(r["timestamp"]), "activeUsers": r["active_users"]} for r in rows],
            "metadata": {"period": period, "from": iso(first), "to": iso(last), "dataSource": "database"},
        }

    async def token_volume(self, limit: int | None = None) -> dict:
        """Tokens with the largest cached supply."""
        limit = clamp_limit(limit, default=10, maximum=100)
        tokens = await self._db(self._repo.top_token_supplies, limit)
        totals = await self._db(self._repo.token_totals)
        return {
            "tokens": [
                {
                    "mint": t["mint"],
                    "volume": t["volume"],
                    "decimals": t["decimals"],
                    "lastUpdated": iso(t["last_updated"]),
                }
                for t in tokens
            ],
            "totalVolume": totals["total_volume"],
            "metadata": {
                "totalTokens": len(tokens),
                "dataSource": "database",
                "lastUpdated": iso_now(),
            },
        }

    async def top_programs(self, period: str | None = None, limit: int | None = None) -> dict:
        """Programs most invoked by cached transactions over a period (unknown period = all time)."""
        period = period or "week"
        limit = clamp_limit(limit, default=10, maximum=100)
        window = PROGRAM_PERIODS.get(period)
        since = self._clock() - window if window else EPOCH
        rows = await self._db(self._repo.transactions_since, since)
        programs = program_activity(rows, limit)
        logger.debug("top_programs({}): {} transactions, {} programs", period, len(rows), len(programs))
        return {
            "data": programs,
            "metadata": {
                "period": period,
                "limit": limit,
                "transactionsScanned": len(rows),
                "lastUpdated": iso_now(),
            },
        }
