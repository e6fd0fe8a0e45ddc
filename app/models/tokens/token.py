"""Token supply and token mint cache tables."""

from app.models.common import CacheTable

TOKEN_DDL = """
CREATE TABLE IF NOT EXISTS tokens (
    mint_address VARCHAR PRIMARY KEY,
    supply VARCHAR,
    decimals INTEGER,
    data JSON NOT NULL,
    last_updated TIMESTAMP NOT NULL
)
"""

TOKEN_MINT_DDL = """
CREATE TABLE IF NOT EXISTS token_mints (
    mint_address VARCHAR PRIMARY KEY,
    data JSON NOT NULL,
    last_updated TIMESTAMP NOT NULL
)
"""


def _describe_supply(payload: dict) -> dict:
    return {"supply": payload.get("amount"), "decimals": payload.get("decimals")}


TOKEN_TABLE = CacheTable(
    name="tokens",
    ddl=TOKEN_DDL,
    key_columns=("mint_address",),
    describe=_describe_supply,
)

TOKEN_MINT_TABLE = CacheTable(
    name="token_mints",
    ddl=TOKEN_MINT_DDL,
    key_columns=("mint_address",),
)
