"""Resource-kind policy table - storage table, TTL and key shape per kind.

Keys must capture every request parameter that changes the response
(a token-holders key without the limit would let two limits collide) and
nothing that changes per request (a timestamp would defeat caching).
"""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from app.models import (
    ACCOUNT_TABLE,
    ANALYTICS_CACHE_TABLE,
    BLOCK_TABLE,
    FEE_TABLE,
    PROGRAM_ACCOUNTS_TABLE,
    SLOT_TABLE,
    TOKEN_ACCOUNT_TABLE,
    TOKEN_HOLDERS_TABLE,
    TOKEN_MINT_TABLE,
    TOKEN_TABLE,
    TRANSACTION_STATUS_TABLE,
    TRANSACTION_TABLE,
    VALIDATOR_TABLE,
    CacheTable,
)
from settings import CACHE_TTL_SECONDS


class ResourceKind(str, Enum):
    """Category of cached upstream data."""

    SLOT = "slot"
    BLOCK = "block"
    LATEST_BLOCK = "latest_block"
    FEES = "fees"
    VALIDATORS = "validators"
    TRANSACTION = "transaction"
    TRANSACTION_STATUS = "transaction_status"
    ACCOUNT = "account"
    PROGRAM_ACCOUNTS = "program_accounts"
    TOKEN_SUPPLY = "token_supply"
    TOKEN_MINTS = "token_mints"
    TOKEN_ACCOUNTS = "token_accounts"
    TOKEN_HOLDERS = "token_holders"
    ANALYTICS = "analytics"


@dataclass(frozen=True)
class CachePolicy:
    """Where a kind is stored and how long its rows stay fresh."""

    kind: ResourceKind
    table: CacheTable
    ttl: timedelta

    def __post_init__(self):
        if self.ttl <= timedelta(0):
            raise ValueError(f"{self.kind.value}: ttl must be positive")


DEFAULT_TTL = timedelta(seconds=CACHE_TTL_SECONDS)
FAST_TTL = timedelta(seconds=5)
SLOW_TTL = timedelta(minutes=15)
ANALYTICS_TTL = timedelta(minutes=1)


def _policy(kind: ResourceKind, table: CacheTable, ttl: timedelta = DEFAULT_TTL) -> CachePolicy:
    return CachePolicy(kind=kind, table=table, ttl=ttl)


POLICIES: dict[ResourceKind, CachePolicy] = {
    p.kind: p
    for p in [
        # Fast-moving chain tip
        _policy(ResourceKind.SLOT, SLOT_TABLE, FAST_TTL),
        _policy(ResourceKind.LATEST_BLOCK, BLOCK_TABLE, FAST_TTL),
        # Default window
        _policy(ResourceKind.BLOCK, BLOCK_TABLE),
        _policy(ResourceKind.FEES, FEE_TABLE),
        _policy(ResourceKind.VALIDATORS, VALIDATOR_TABLE),
        _policy(ResourceKind.TRANSACTION, TRANSACTION_TABLE),
        _policy(ResourceKind.TRANSACTION_STATUS, TRANSACTION_STATUS_TABLE),
        _policy(ResourceKind.ACCOUNT, ACCOUNT_TABLE),
        _policy(ResourceKind.PROGRAM_ACCOUNTS, PROGRAM_ACCOUNTS_TABLE),
        _policy(ResourceKind.TOKEN_SUPPLY, TOKEN_TABLE),
        _policy(ResourceKind.TOKEN_MINTS, TOKEN_MINT_TABLE),
        _policy(ResourceKind.TOKEN_ACCOUNTS, TOKEN_ACCOUNT_TABLE),
        # Slow-changing holder lists
        _policy(ResourceKind.TOKEN_HOLDERS, TOKEN_HOLDERS_TABLE, SLOW_TTL),
        # RPC-heavy aggregates
        _policy(ResourceKind.ANALYTICS, ANALYTICS_CACHE_TABLE, ANALYTICS_TTL),
    ]
}


# Key builders

CURRENT_SLOT_KEY = "current"
LATEST_FEES_KEY = "latest"


def block_key(slot: int) -> str:
    return str(slot)


def program_accounts_key(
    program_id: str,
    datasize: int | None,
    data_slice: int | None,
    limit: int,
    offset: int,
) -> str:
    """Program id plus every filter and pagination parameter."""
    parts = [program_id, datasize, data_slice, limit, offset]
    return "|".join("" if p is None else str(p) for p in parts)


def token_holders_key(mint: str, limit: int) -> str:
    return TOKEN_HOLDERS_TABLE.join_key((mint, limit))


def analytics_key(name: str, **params) -> str:
    """Aggregate name plus its parameters in a stable order."""
    if not params:
        return name
    query = "&".join(f"{k}={params[k]}" for k in sorted(params))
    return f"{name}?{query}"
