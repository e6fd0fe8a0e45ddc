"""Tests for CacheRepository over in-memory DuckDB."""

from datetime import datetime, timedelta

from app.models import ACCOUNT_TABLE, TOKEN_ACCOUNT_TABLE, TOKEN_HOLDERS_TABLE, VALIDATOR_TABLE

NOW = datetime(2026, 1, 1, 12, 0, 0)
BEFORE = NOW - timedelta(minutes=1)


class TestUpsert:
    def test_insert_and_find(self, cache_repo):
        cache_repo.upsert(ACCOUNT_TABLE, "Addr1", {"owner": "Prog", "lamports": 5}, NOW)

        entry = cache_repo.find_fresh(ACCOUNT_TABLE, "Addr1", BEFORE)
        assert entry.key == "Addr1"
        assert entry.payload == {"owner": "Prog", "lamports": 5}
        assert entry.last_updated == NOW

    def test_replace_keeps_one_row(self, cache_repo):
        cache_repo.upsert(ACCOUNT_TABLE, "Addr1", {"lamports": 1}, BEFORE)
        cache_repo.upsert(ACCOUNT_TABLE, "Addr1", {"lamports": 2}, NOW)

        rows = cache_repo.fetchall("SELECT lamports FROM accounts WHERE address = ?", ["Addr1"])
        assert rows == [(2,)]

    def test_descriptive_columns_filled(self, cache_repo):
        cache_repo.upsert(ACCOUNT_TABLE, "Addr1", {"owner": "Prog", "lamports": 9}, NOW)
        assert cache_repo.fetchone("SELECT owner, lamports FROM accounts") == ("Prog", 9)

    def test_composite_key(self, cache_repo):
        cache_repo.upsert(TOKEN_HOLDERS_TABLE, "Mint:10", {"total": "1"}, NOW)
        cache_repo.upsert(TOKEN_HOLDERS_TABLE, "Mint:20", {"total": "2"}, NOW)

        assert cache_repo.find_fresh(TOKEN_HOLDERS_TABLE, "Mint:20", BEFORE).payload == {"total": "2"}
        assert cache_repo.fetchone("SELECT COUNT(*) FROM token_holders")[0] == 2

    def test_upsert_many(self, cache_repo):
        nodes = [("V1", {"gossip": "a"}), ("V2", {"gossip": "b"})]
        cache_repo.upsert_many(VALIDATOR_TABLE, nodes, NOW)

        entries = cache_repo.find_many_fresh(VALIDATOR_TABLE, BEFORE, order_by="pubkey")
        assert [e.key for e in entries] == ["V1", "V2"]


class TestFreshLookup:
    def test_stale_entry_not_returned(self, cache_repo):
        cache_repo.upsert(ACCOUNT_TABLE, "Addr1", {}, BEFORE)
        assert cache_repo.find_fresh(ACCOUNT_TABLE, "Addr1", BEFORE) is None

    def test_missing_entry(self, cache_repo):
        assert cache_repo.find_fresh(ACCOUNT_TABLE, "nope", BEFORE) is None

    def test_find_many_where_and_limit(self, cache_repo):
        rows = [
            ("T1", {"owner": "O1", "mint": "M", "amount": "1"}),
            ("T2", {"owner": "O1", "mint": "M", "amount": "2"}),
            ("T3", {"owner": "O2", "mint": "M", "amount": "3"}),
        ]
        cache_repo.upsert_many(TOKEN_ACCOUNT_TABLE, rows, NOW)

        owned = cache_repo.find_many_fresh(
            TOKEN_ACCOUNT_TABLE, BEFORE, where="owner_address = ?", params=["O1"], order_by="account_address"
        )
        assert [e.key for e in owned] == ["T1", "T2"]

        limited = cache_repo.find_many_fresh(TOKEN_ACCOUNT_TABLE, BEFORE, order_by="account_address DESC", limit=1)
        assert [e.key for e in limited] == ["T3"]


class TestMaintenance:
    def test_delete(self, cache_repo):
        cache_repo.upsert(ACCOUNT_TABLE, "Addr1", {}, NOW)
        cache_repo.delete(ACCOUNT_TABLE, "Addr1")
        assert cache_repo.find_fresh(ACCOUNT_TABLE, "Addr1", BEFORE) is None

    def test_clear_one_table(self, cache_repo):
        cache_repo.upsert(ACCOUNT_TABLE, "Addr1", {}, NOW)
        cache_repo.upsert(VALIDATOR_TABLE, "V1", {}, NOW)

        cache_repo.clear(ACCOUNT_TABLE)

        stats = {s["table"]: s["rows"] for s in cache_repo.stats()}
        assert stats["accounts"] == 0
        assert stats["validators"] == 1

    def test_stats_reports_newest_write(self, cache_repo):
        cache_repo.upsert(ACCOUNT_TABLE, "A", {}, BEFORE)
        cache_repo.upsert(ACCOUNT_TABLE, "B", {}, NOW)

        stats = {s["table"]: s for s in cache_repo.stats()}
        assert stats["accounts"]["rows"] == 2
        assert stats["accounts"]["last_updated"] == NOW
