"""Tests for the cache policy table and key builders."""

from datetime import timedelta

import pytest

from app.models import ACCOUNT_TABLE, BLOCK_TABLE, TOKEN_HOLDERS_TABLE
from app.services.cache import (
    POLICIES,
    CachePolicy,
    ResourceKind,
    analytics_key,
    block_key,
    program_accounts_key,
    token_holders_key,
)


class TestPolicies:
    def test_every_kind_has_policy(self):
        assert set(POLICIES) == set(ResourceKind)

    def test_ttls(self):
        assert POLICIES[ResourceKind.SLOT].ttl == timedelta(seconds=5)
        assert POLICIES[ResourceKind.TOKEN_HOLDERS].ttl == timedelta(minutes=15)
        assert POLICIES[ResourceKind.ACCOUNT].ttl == timedelta(minutes=5)

    def test_latest_block_reads_block_table(self):
        assert POLICIES[ResourceKind.LATEST_BLOCK].table is BLOCK_TABLE
        assert POLICIES[ResourceKind.LATEST_BLOCK].ttl < POLICIES[ResourceKind.BLOCK].ttl

    def test_non_positive_ttl_rejected(self):
        with pytest.raises(ValueError):
            CachePolicy(ResourceKind.ACCOUNT, ACCOUNT_TABLE, timedelta(0))


class TestKeys:
    def test_block_key(self):
        assert block_key(42) == "42"
        assert BLOCK_TABLE.split_key(block_key(42)) == (42,)

    def test_holders_key_round_trips_composite(self):
        key = token_holders_key("Mint111", 50)
        assert key == "Mint111:50"
        assert TOKEN_HOLDERS_TABLE.split_key(key) == ("Mint111", 50)

    def test_holders_key_depends_on_limit(self):
        assert token_holders_key("Mint111", 10) != token_holders_key("Mint111", 20)

    def test_program_accounts_key_includes_filters(self):
        plain = program_accounts_key("Prog", None, None, 100, 0)
        sized = program_accounts_key("Prog", 82, None, 100, 0)
        paged = program_accounts_key("Prog", None, None, 100, 100)
        assert plain == "Prog|||100|0"
        assert len({plain, sized, paged}) == 3

    def test_analytics_key_sorted_params(self):
        assert analytics_key("overview") == "overview"
        assert analytics_key("top", period="week", limit=5) == analytics_key("top", limit=5, period="week")
        assert analytics_key("top", limit=5, period="week") == "top?limit=5&period=week"

    def test_split_key_wrong_arity(self):
        with pytest.raises(ValueError):
            TOKEN_HOLDERS_TABLE.split_key("no-separator")
