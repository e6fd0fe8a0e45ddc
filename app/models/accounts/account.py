"""Account info cache table."""

from app.models.common import CacheTable

ACCOUNT_DDL = """
CREATE TABLE IF NOT EXISTS accounts (
    address VARCHAR PRIMARY KEY,
    owner VARCHAR,
    lamports BIGINT,
    data JSON NOT NULL,
    last_updated TIMESTAMP NOT NULL
)
"""


def _describe(payload: dict) -> dict:
    return {"owner": payload.get("owner"), "lamports": payload.get("lamports")}


ACCOUNT_TABLE = CacheTable(
    name="accounts",
    ddl=ACCOUNT_DDL,
    key_columns=("address",),
    describe=_describe,
)
