"""Token models - supply, mints, owner accounts, holders."""

from app.models.tokens.holder import (
    TOKEN_ACCOUNT_DDL,
    TOKEN_ACCOUNT_TABLE,
    TOKEN_HOLDERS_DDL,
    TOKEN_HOLDERS_TABLE,
)
from app.models.tokens.token import TOKEN_DDL, TOKEN_MINT_DDL, TOKEN_MINT_TABLE, TOKEN_TABLE

__all__ = [
    "TOKEN_DDL",
    "TOKEN_TABLE",
    "TOKEN_MINT_DDL",
    "TOKEN_MINT_TABLE",
    "TOKEN_ACCOUNT_DDL",
    "TOKEN_ACCOUNT_TABLE",
    "TOKEN_HOLDERS_DDL",
    "TOKEN_HOLDERS_TABLE",
]
