"""Account models - account info and program accounts."""

from app.models.accounts.account import ACCOUNT_DDL, ACCOUNT_TABLE
from app.models.accounts.program import PROGRAM_ACCOUNTS_DDL, PROGRAM_ACCOUNTS_TABLE

__all__ = [
    "ACCOUNT_DDL",
    "ACCOUNT_TABLE",
    "PROGRAM_ACCOUNTS_DDL",
    "PROGRAM_ACCOUNTS_TABLE",
]
