"""Current slot cache table."""

from app.models.common import CacheTable

SLOT_DDL = """
CREATE TABLE IF NOT EXISTS slots (
    cache_key VARCHAR PRIMARY KEY,
    slot BIGINT,
    data JSON NOT NULL,
    last_updated TIMESTAMP NOT NULL
)
"""


def _describe(payload: dict) -> dict:
    return {"slot": payload.get("slot")}


SLOT_TABLE = CacheTable(
    name="slots",
    ddl=SLOT_DDL,
    key_columns=("cache_key",),
    describe=_describe,
)
