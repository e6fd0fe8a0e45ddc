"""Transaction and signature status cache tables."""

from app.models.common import CacheTable, unix_to_utc

TRANSACTION_DDL = """
CREATE TABLE IF NOT EXISTS transactions (
    signature VARCHAR PRIMARY KEY,
    slot BIGINT,
    block_time TIMESTAMP,
    data JSON NOT NULL,
    last_updated TIMESTAMP NOT NULL
)
"""

TRANSACTION_STATUS_DDL = """
CREATE TABLE IF NOT EXISTS transaction_statuses (
    signature VARCHAR PRIMARY KEY,
    confirmation_status VARCHAR,
    data JSON NOT NULL,
    last_updated TIMESTAMP NOT NULL
)
"""


def _describe_transaction(payload: dict) -> dict:
    return {"slot": payload.get("slot"), "block_time": unix_to_utc(payload.get("blockTime"))}


def _describe_status(payload: dict) -> dict:
    return {"confirmation_status": payload.get("confirmationStatus")}


TRANSACTION_TABLE = CacheTable(
    name="transactions",
    ddl=TRANSACTION_DDL,
    key_columns=("signature",),
    describe=_describe_transaction,
)

TRANSACTION_STATUS_TABLE = CacheTable(
    name="transaction_statuses",
    ddl=TRANSACTION_STATUS_DDL,
    key_columns=("signature",),
    describe=_describe_status,
)
