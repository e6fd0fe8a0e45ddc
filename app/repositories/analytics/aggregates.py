"""Analytics repository - aggregates over the cached tables."""

import json
from datetime import datetime

from loguru import logger

from app.repositories.base import BaseRepository

PERIODS = ("hour", "day", "week", "month", "year")


def _check_period(period: str) -> str:
    if period not in PERIODS:
        raise ValueError(f"Invalid period: {period}. Must be one of {', '.join(PERIODS)}")
    return period


class AnalyticsRepository(BaseRepository):
    """Read-only aggregate queries for the analytics routes."""

    def count_accounts(self) -> int:
        """Accounts seen by the cache."""
        return int(self.scalar("SELECT COUNT(*) FROM accounts"))

    def count_transactions_since(self, since: datetime) -> int:
        """Transactions cached after `since`."""
        return int(self.scalar("SELECT COUNT(*) FROM transactions WHERE last_updated >= ?", [since]))

    def token_totals(self) -> dict:
        """Number of tokens with a known supply and their summed supply."""
        row = self.fetchone(
            """
            SELECT COUNT(*), COALESCE(SUM(TRY_CAST(supply AS HUGEINT)), 0)
            FROM tokens
            WHERE supply IS NOT NULL
            """
        )
        return {"count": int(row[0]), "total_volume": str(row[1])}

    def transaction_timeseries(self, period: str, start: datetime, end: datetime, limit: int) -> list[dict]:
        """Cached transactions per time bucket with success/failure split."""
        period = _check_period(period)
        rows = self.fetchall(
            f"""
            SELECT
                date_trunc('{period}', last_updated) AS bucket,
                COUNT(*) AS total,
                SUM(CASE WHEN json_extract_string(data, '$.meta.err') IS NULL THEN 1 ELSE 0 END) AS ok
            FROM transactions
            WHERE last_updated >= ? AND last_updated <= ?
            GROUP BY bucket
            ORDER BY bucket
            LIMIT {int(limit)}
            """,
            [start, end],
        )
        result = [
            {"timestamp": r[0], "total": int(r[1]), "successful": int(r[2]), "failed": int(r[1]) - int(r[2])}
            for r in rows
        ]
        logger.debug("transaction_timeseries({}): {} buckets", period, len(result))
        return result

    def account_timeseries(self, period: str, start: datetime, end: datetime) -> list[dict]:
        """Cached accounts per time bucket."""
        period = _check_period(period)
        rows = self.fetchall(
            f"""
            SELECT date_trunc('{period}', last_updated) AS bucket, COUNT(*) AS active
            FROM accounts
            WHERE last_updated >= ? AND last_updated <= ?
            GROUP BY bucket
            ORDER BY bucket
            """,
            [start, end],
        )
        return [{"timestamp": r[0], "active_users": int(r[1])} for r in rows]

    def top_token_supplies(self, limit: int) -> list[dict]:
        """Tokens ordered by raw supply, largest first."""
        rows = self.fetchall(
            f"""
            SELECT mint_address, supply, decimals, last_updated
            FROM tokens
            WHERE supply IS NOT NULL AND supply != '0'
            ORDER BY TRY_CAST(supply AS HUGEINT) DESC NULLS LAST
            LIMIT {int(limit)}
            """
        )
        return [{"mint": r[0], "volume": r[1], "decimals": r[2], "last_updated": r[3]} for r in rows]

    def transactions_since(self, since: datetime) -> list[dict]:
        """Payloads of transactions cached after `since`."""
        rows = self.fetchall(
            "SELECT signature, data FROM transactions WHERE last_updated >= ?",
            [since],
        )
        return [{"signature": r[0], "data": json.loads(r[1])} for r in rows]
