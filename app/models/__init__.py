"""Models package - cache table descriptors for all resource kinds."""

from app.models.accounts import ACCOUNT_TABLE, PROGRAM_ACCOUNTS_TABLE
from app.models.common import ANALYTICS_CACHE_TABLE, CacheEntry, CacheTable
from app.models.network import BLOCK_TABLE, FEE_TABLE, SLOT_TABLE, VALIDATOR_TABLE
from app.models.tokens import (
    TOKEN_ACCOUNT_TABLE,
    TOKEN_HOLDERS_TABLE,
    TOKEN_MINT_TABLE,
    TOKEN_TABLE,
)
from app.models.transactions import TRANSACTION_STATUS_TABLE, TRANSACTION_TABLE

ALL_TABLES = [
    # Network
    SLOT_TABLE,
    BLOCK_TABLE,
    FEE_TABLE,
    VALIDATOR_TABLE,
    # Transactions
    TRANSACTION_TABLE,
    TRANSACTION_STATUS_TABLE,
    # Accounts
    ACCOUNT_TABLE,
    PROGRAM_ACCOUNTS_TABLE,
    # Tokens
    TOKEN_TABLE,
    TOKEN_MINT_TABLE,
    TOKEN_ACCOUNT_TABLE,
    TOKEN_HOLDERS_TABLE,
    # Common
    ANALYTICS_CACHE_TABLE,
]

ALL_DDL = [t.ddl for t in ALL_TABLES]

__all__ = [
    # Common
    "CacheEntry",
    "CacheTable",
    "ANALYTICS_CACHE_TABLE",
    # Network
    "SLOT_TABLE",
    "BLOCK_TABLE",
    "FEE_TABLE",
    "VALIDATOR_TABLE",
    # Transactions
    "TRANSACTION_TABLE",
    "TRANSACTION_STATUS_TABLE",
    # Accounts
    "ACCOUNT_TABLE",
    "PROGRAM_ACCOUNTS_TABLE",
    # Tokens
    "TOKEN_TABLE",
    "TOKEN_MINT_TABLE",
    "TOKEN_ACCOUNT_TABLE",
    "TOKEN_HOLDERS_TABLE",
    # All
    "ALL_TABLES",
    "ALL_DDL",
]
