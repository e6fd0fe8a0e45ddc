"""Shared fixtures: in-memory DuckDB, controllable clock, fake chain client."""

from collections import Counter
from datetime import datetime, timedelta

import pytest

from app.repositories import MEMORY, CacheRepository, Database
from app.services.cache import ReadThroughCache
from rpc_client import RpcUnavailableError

# Valid base58 keys: leading "1"s decode to zero bytes
PUBKEY = "1" * 32
OTHER_PUBKEY = "1" * 31 + "2"
SIGNATURE = "1" * 64


class FakeClock:
    """Naive UTC clock advanced by hand."""

    def __init__(self, start: datetime = datetime(2026, 1, 1, 12, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class FakeChainClient:
    """In-memory stand-in for ChainClient; counts calls per method."""

    def __init__(self):
        self.calls = Counter()
        self.healthy = True
        self.slot = 1000
        self.transaction_count = 5_000_000
        self.blocks: dict[int, dict] = {}
        self.accounts: dict[str, dict] = {}
        self.balances: dict[str, int] = {}
        self.signatures: list[dict] = []
        self.transactions: dict[str, dict] = {}
        self.statuses: dict[str, dict] = {}
        self.token_supplies: dict[str, dict] = {}
        self.largest_accounts: dict[str, list[dict]] = {}
        self.parsed_accounts: dict[str, dict] = {}
        self.token_accounts: dict[str, list[dict]] = {}
        self.program_accounts: dict[str, list[dict]] = {}
        self.cluster_nodes = [
            {"pubkey": PUBKEY, "gossip": "10.0.0.1:8001", "version": "1.18.0"},
            {"pubkey": OTHER_PUBKEY, "gossip": "10.0.0.2:8001", "version": "1.18.1"},
        ]

    def _hit(self, method: str) -> None:
        self.calls[method] += 1

    async def get_health(self) -> str:
        self._hit("get_health")
        if not self.healthy:
            raise RpcUnavailableError("getHealth: Node is behind", code=-32005, method="getHealth")
        return "ok"

    async def get_slot(self) -> int:
        self._hit("get_slot")
        return self.slot

    async def get_transaction_count(self) -> int:
        self._hit("get_transaction_count")
        return self.transaction_count

    async def get_epoch_info(self) -> dict:
        self._hit("get_epoch_info")
        return {"epoch": 12, "slotIndex": 108000, "slotsInEpoch": 432000, "absoluteSlot": self.slot}

    async def get_supply(self) -> dict:
        self._hit("get_supply")
        return {"total": 1000, "circulating": 800, "nonCirculating": 200, "nonCirculatingAccounts": []}

    async def get_recent_performance_samples(self, limit: int = 5) -> list[dict]:
        self._hit("get_recent_performance_samples")
        sample = {"slot": self.slot, "numTransactions": 6000, "numSlots": 150, "samplePeriodSecs": 60}
        return [sample] * limit

    async def get_cluster_nodes(self) -> list[dict]:
        self._hit("get_cluster_nodes")
        return self.cluster_nodes

    async def get_block(self, slot: int) -> dict | None:
        self._hit("get_block")
        return self.blocks.get(slot)

    async def get_latest_blockhash(self) -> dict:
        self._hit("get_latest_blockhash")
        return {"blockhash": "Hash1111", "lastValidBlockHeight": 900}

    async def get_recent_prioritization_fees(self) -> list[dict]:
        self._hit("get_recent_prioritization_fees")
        return [{"slot": self.slot - i, "prioritizationFee": fee} for i, fee in enumerate([0, 10, 20])]

    async def get_balance(self, pubkey: str) -> int:
        self._hit("get_balance")
        return self.balances.get(pubkey, 0)

    async def get_account_info(self, pubkey: str, encoding: str = "base64") -> dict | None:
        self._hit("get_account_info")
        return self.accounts.get(pubkey)

    async def get_multiple_accounts(self, pubkeys: list[str], encoding: str = "base64") -> list[dict | None]:
        self._hit("get_multiple_accounts")
        source = self.parsed_accounts if encoding == "jsonParsed" else self.accounts
        return [source.get(p) for p in pubkeys]

    async def get_signatures_for_address(self, pubkey, limit=10, before=None, until=None) -> list[dict]:
        self._hit("get_signatures_for_address")
        return self.signatures[:limit]

    async def get_transaction(self, signature: str) -> dict | None:
        self._hit("get_transaction")
        return self.transactions.get(signature)

    async def get_signature_status(self, signature: str) -> dict | None:
        self._hit("get_signature_status")
        return self.statuses.get(signature)

    async def get_token_supply(self, mint: str) -> dict | None:
        self._hit("get_token_supply")
        return self.token_supplies.get(mint)

    async def get_token_largest_accounts(self, mint: str) -> list[dict]:
        self._hit("get_token_largest_accounts")
        return self.largest_accounts.get(mint, [])

    async def get_token_accounts_by_owner(self, owner: str, program_id: str) -> list[dict]:
        self._hit("get_token_accounts_by_owner")
        return self.token_accounts.get(owner, [])

    async def get_program_accounts(self, program_id, filters=None, data_slice=None) -> list[dict]:
        self._hit("get_program_accounts")
        return self.program_accounts.get(program_id, [])


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def db():
    database = Database(MEMORY)
    database.connect()
    yield database
    database.close()


@pytest.fixture
def cache_repo(db) -> CacheRepository:
    return CacheRepository(db)


@pytest.fixture
def cache(cache_repo, clock):
    manager = ReadThroughCache(cache_repo, clock=clock, write_workers=2)
    yield manager
    manager._executor.shutdown(wait=True)


@pytest.fixture
def chain() -> FakeChainClient:
    return FakeChainClient()
