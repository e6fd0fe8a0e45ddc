"""Fee snapshot cache table."""

from app.models.common import CacheTable

FEE_DDL = """
CREATE TABLE IF NOT EXISTS fees (
    cache_key VARCHAR PRIMARY KEY,
    slot BIGINT,
    data JSON NOT NULL,
    last_updated TIMESTAMP NOT NULL
)
"""


def _describe(payload: dict) -> dict:
    return {"slot": payload.get("slot")}


FEE_TABLE = CacheTable(
    name="fees",
    ddl=FEE_DDL,
    key_columns=("cache_key",),
    describe=_describe,
)
