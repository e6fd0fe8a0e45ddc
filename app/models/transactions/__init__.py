"""Transaction models."""

from app.models.transactions.transaction import (
    TRANSACTION_DDL,
    TRANSACTION_STATUS_DDL,
    TRANSACTION_STATUS_TABLE,
    TRANSACTION_TABLE,
)

__all__ = [
    "TRANSACTION_DDL",
    "TRANSACTION_TABLE",
    "TRANSACTION_STATUS_DDL",
    "TRANSACTION_STATUS_TABLE",
]
