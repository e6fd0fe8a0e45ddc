"""Block cache table, keyed by slot."""

from app.models.common import CacheTable, unix_to_utc

BLOCK_DDL = """
CREATE TABLE IF NOT EXISTS blocks (
    slot BIGINT PRIMARY KEY,
    parent_slot BIGINT,
    block_time TIMESTAMP,
    block_height BIGINT,
    blockhash VARCHAR,
    data JSON NOT NULL,
    last_updated TIMESTAMP NOT NULL
)
"""


def _describe(payload: dict) -> dict:
    return {
        "parent_slot": payload.get("parentSlot"),
        "block_time": unix_to_utc(payload.get("blockTime")),
        "block_height": payload.get("blockHeight"),
        "blockhash": payload.get("blockhash"),
    }


BLOCK_TABLE = CacheTable(
    name="blocks",
    ddl=BLOCK_DDL,
    key_columns=("slot",),
    key_types=(int,),
    describe=_describe,
)
