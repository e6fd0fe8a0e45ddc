"""Read-through cache - policy table and manager."""

from app.services.cache.manager import ReadThroughCache, utcnow
from app.services.cache.policy import (
    CURRENT_SLOT_KEY,
    LATEST_FEES_KEY,
    POLICIES,
    CachePolicy,
    ResourceKind,
    analytics_key,
    block_key,
    program_accounts_key,
    token_holders_key,
)

__all__ = [
    "ReadThroughCache",
    "utcnow",
    "CachePolicy",
    "ResourceKind",
    "POLICIES",
    "CURRENT_SLOT_KEY",
    "LATEST_FEES_KEY",
    "block_key",
    "program_accounts_key",
    "token_holders_key",
    "analytics_key",
]
