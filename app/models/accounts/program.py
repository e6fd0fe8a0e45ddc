"""Program accounts cache table - one row per query shape."""

from app.models.common import CacheTable

PROGRAM_ACCOUNTS_DDL = """
CREATE TABLE IF NOT EXISTS program_accounts (
    cache_key VARCHAR PRIMARY KEY,
    program_id VARCHAR NOT NULL,
    total INTEGER,
    data JSON NOT NULL,
    last_updated TIMESTAMP NOT NULL
)
"""


def _describe(payload: dict) -> dict:
    return {
        "program_id": payload["programId"],
        "total": payload.get("pagination", {}).get("total"),
    }


PROGRAM_ACCOUNTS_TABLE = CacheTable(
    name="program_accounts",
    ddl=PROGRAM_ACCOUNTS_DDL,
    key_columns=("cache_key",),
    describe=_describe,
)
