"""Token account and token holder cache tables."""

from app.models.common import CacheTable

TOKEN_ACCOUNT_DDL = """
CREATE TABLE IF NOT EXISTS token_accounts (
    account_address VARCHAR PRIMARY KEY,
    owner_address VARCHAR NOT NULL,
    mint_address VARCHAR,
    amount VARCHAR,
    data JSON NOT NULL,
    last_updated TIMESTAMP NOT NULL
)
"""

# Composite key: one row per (mint, requested limit)
TOKEN_HOLDERS_DDL = """
CREATE TABLE IF NOT EXISTS token_holders (
    mint_address VARCHAR NOT NULL,
    holder_limit INTEGER NOT NULL,
    total VARCHAR,
    data JSON NOT NULL,
    last_updated TIMESTAMP NOT NULL,
    PRIMARY KEY (mint_address, holder_limit)
)
"""


def _describe_account(payload: dict) -> dict:
    return {
        "owner_address": payload["owner"],
        "mint_address": payload.get("mint"),
        "amount": payload.get("amount"),
    }


def _describe_holders(payload: dict) -> dict:
    return {"total": payload.get("total")}


TOKEN_ACCOUNT_TABLE = CacheTable(
    name="token_accounts",
    ddl=TOKEN_ACCOUNT_DDL,
    key_columns=("account_address",),
    describe=_describe_account,
)

TOKEN_HOLDERS_TABLE = CacheTable(
    name="token_holders",
    ddl=TOKEN_HOLDERS_DDL,
    key_columns=("mint_address", "holder_limit"),
    key_types=(str, int),
    describe=_describe_holders,
)
