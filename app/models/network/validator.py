"""Validator (cluster node) cache table."""

from app.models.common import CacheTable

VALIDATOR_DDL = """
CREATE TABLE IF NOT EXISTS validators (
    pubkey VARCHAR PRIMARY KEY,
    gossip VARCHAR,
    version VARCHAR,
    data JSON NOT NULL,
    last_updated TIMESTAMP NOT NULL
)
"""


def _describe(payload: dict) -> dict:
    return {"gossip": payload.get("gossip"), "version": payload.get("version")}


VALIDATOR_TABLE = CacheTable(
    name="validators",
    ddl=VALIDATOR_DDL,
    key_columns=("pubkey",),
    describe=_describe,
)
