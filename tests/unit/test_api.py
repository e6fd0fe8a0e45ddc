"""API tests - FastAPI TestClient over a container with a fake chain client."""

import asyncio
import base64
import struct

import pytest
from fastapi.testclient import TestClient

from app.container import Container
from web.app import create_app

PUBKEY = "1" * 32
OTHER_PUBKEY = "1" * 31 + "2"
SIGNATURE = "1" * 64


@pytest.fixture
def container(db, chain, clock):
    built = Container(db, chain, clock=clock, write_workers=2)
    yield built
    built.cache._executor.shutdown(wait=True)


@pytest.fixture
def api(container):
    with TestClient(create_app(container)) as client:
        yield client


def drain(container: Container) -> None:
    asyncio.run(container.cache.drain())


class TestErrors:
    def test_unknown_route(self, api):
        resp = api.get("/api/nope")
        assert resp.status_code == 404
        assert resp.json()["status"] == "error"

    def test_invalid_pubkey(self, api, chain):
        resp = api.get("/api/account/not-a-key/info")
        assert resp.status_code == 400
        assert resp.json()["message"].startswith("Invalid public key")
        assert chain.calls["get_account_info"] == 0

    def test_unhealthy_node(self, api, chain):
        chain.healthy = False
        resp = api.get("/api/health")
        assert resp.status_code == 502
        assert resp.json() == {
            "status": "error",
            "message": "Node is unhealthy",
            "details": "getHealth: Node is behind",
        }

    def test_invalid_body(self, api):
        resp = api.post("/api/account/batch", json={"pubkeys": "not-a-list"})
        assert resp.status_code == 400


class TestNetwork:
    def test_health(self, api):
        assert api.get("/api/health").json() == {"status": "ok", "node": "ok"}

    def test_slot_cached(self, api, chain, container, clock):
        assert api.get("/api/slot").json() == {"slot": 1000}
        drain(container)

        chain.slot = 1001
        clock.advance(4)
        assert api.get("/api/slot").json() == {"slot": 1000}

        clock.advance(2)
        assert api.get("/api/slot").json() == {"slot": 1001}
        assert chain.calls["get_slot"] == 2

    def test_block(self, api, chain):
        chain.blocks[42] = {"blockhash": "H", "parentSlot": 41, "blockTime": 1_700_000_000, "blockHeight": 40}
        body = api.get("/api/block/42").json()
        assert body["slot"] == 42
        assert body["blockTimeFormatted"] == "2023-11-14T22:13:20.000Z"

    def test_block_not_found(self, api):
        assert api.get("/api/block/7").status_code == 404

    def test_block_invalid_slot(self, api):
        assert api.get("/api/block/abc").status_code == 400

    def test_latest_block(self, api, chain):
        chain.blocks[1000] = {"blockhash": "H", "parentSlot": 999, "blockTime": None, "blockHeight": 990}
        body = api.get("/api/block/latest").json()
        assert body["slot"] == 1000
        assert body["blockTimeFormatted"] is None

    def test_latest_block_ignores_older_cached_block(self, api, chain, container):
        chain.blocks[42] = {"blockhash": "Old", "parentSlot": 41, "blockTime": None, "blockHeight": 40}
        chain.blocks[1000] = {"blockhash": "Tip", "parentSlot": 999, "blockTime": None, "blockHeight": 990}
        assert api.get("/api/block/42").json()["slot"] == 42
        drain(container)

        body = api.get("/api/block/latest").json()
        assert body["slot"] == 1000
        assert body["blockhash"] == "Tip"

    def test_fees(self, api):
        body = api.get("/api/fees/latest").json()
        assert body["blockhash"] == "Hash1111"
        assert body["lastValidBlockHeight"] == 900
        assert body["prioritizationFees"] == {"min": 0, "median": 10, "max": 20, "samples": 3}

    def test_validators_cached(self, api, chain, container):
        assert len(api.get("/api/validators").json()) == 2
        drain(container)
        assert len(api.get("/api/validators").json()) == 2
        assert chain.calls["get_cluster_nodes"] == 1


class TestAccounts:
    def test_account_not_found_not_cached(self, api, chain, container):
        assert api.get(f"/api/account/{PUBKEY}/info").status_code == 404
        drain(container)

        chain.accounts[PUBKEY] = {"lamports": 5, "owner": OTHER_PUBKEY, "data": ["", "base64"], "rentEpoch": 2**64 - 1}
        body = api.get(f"/api/account/{PUBKEY}/info").json()
        assert body["lamports"] == 5
        assert body["data"] == ""
        assert body["rentEpoch"] == str(2**64 - 1)
        assert chain.calls["get_account_info"] == 2

    def test_balance(self, api, chain):
        chain.balances[PUBKEY] = 2_500_000_000
        assert api.get(f"/api/balance/{PUBKEY}").json() == {"lamports": 2_500_000_000, "sol": 2.5}

    def test_signatures_pagination(self, api, chain):
        chain.signatures = [{"signature": f"sig{i}", "slot": 10 - i} for i in range(3)]
        body = api.get(f"/api/account/{PUBKEY}/transactions?limit=2").json()
        assert body["count"] == 2
        assert body["pagination"]["hasMore"] is True
        assert body["pagination"]["nextCursor"] == "sig1"
        assert body["pagination"]["prevCursor"] == "sig0"

    def test_batch(self, api, chain):
        chain.accounts[PUBKEY] = {"lamports": 1, "owner": OTHER_PUBKEY, "data": ["", "base64"], "rentEpoch": 0}
        body = api.post("/api/account/batch", json={"pubkeys": [PUBKEY, OTHER_PUBKEY]}).json()
        assert body[0]["account"]["lamports"] == 1
        assert body[1] == {"pubkey": OTHER_PUBKEY, "account": None}

    def test_batch_limits(self, api):
        assert api.post("/api/account/batch", json={"pubkeys": []}).status_code == 400
        too_many = {"pubkeys": [PUBKEY] * 101}
        resp = api.post("/api/account/batch", json=too_many)
        assert resp.status_code == 400
        assert resp.json()["message"] == "Maximum 100 pubkeys allowed"


class TestTransactions:
    def test_count(self, api):
        assert api.get("/api/tx/count").json() == {"success": True, "count": 5_000_000}

    def test_transaction(self, api, chain):
        chain.transactions[SIGNATURE] = {"slot": 5, "blockTime": 1_700_000_000, "meta": {"err": None}}
        assert api.get(f"/api/tx/{SIGNATURE}").json()["slot"] == 5

    def test_transaction_not_found(self, api):
        assert api.get(f"/api/tx/{SIGNATURE}").status_code == 404

    def test_invalid_signature(self, api):
        assert api.get(f"/api/tx/{PUBKEY}").status_code == 400

    def test_status(self, api, chain):
        chain.statuses[SIGNATURE] = {"slot": 5, "confirmationStatus": "finalized", "err": None}
        body = api.get(f"/api/tx/{SIGNATURE}/status").json()
        assert body["signature"] == SIGNATURE
        assert body["confirmationStatus"] == "finalized"
        assert body["lastUpdated"].endswith("Z")


def mint_data(supply: int) -> str:
    raw = struct.pack("<I32sQBBI32s", 0, bytes(32), supply, 9, 1, 0, bytes(32))
    return base64.b64encode(raw).decode()


class TestTokens:
    def test_mints(self, api, chain, container):
        chain.program_accounts[container.tokens.token_program_id] = [
            {"pubkey": PUBKEY, "account": {"data": [mint_data(100), "base64"]}},
            {"pubkey": OTHER_PUBKEY, "account": {"data": [mint_data(0), "base64"]}},
        ]
        body = api.get("/api/tokens/mints").json()
        assert body["count"] == 2
        assert body["supplyGreater0"] == 1

    def test_supply(self, api, chain):
        chain.token_supplies[PUBKEY] = {"amount": "1000", "decimals": 2, "uiAmount": 10.0, "uiAmountString": "10"}
        body = api.get(f"/api/token/{PUBKEY}/supply").json()
        assert body["mint"] == PUBKEY
        assert body["amount"] == "1000"

    def test_holders(self, api, chain):
        chain.largest_accounts[PUBKEY] = [
            {"address": OTHER_PUBKEY, "amount": "700", "decimals": 2, "uiAmount": 7.0, "uiAmountString": "7"},
            {"address": "A2", "amount": "300", "decimals": 2, "uiAmount": 3.0, "uiAmountString": "3"},
        ]
        chain.parsed_accounts[OTHER_PUBKEY] = {
            "data": {
                "parsed": {
                    "info": {
                        "owner": PUBKEY,
                        "state": "frozen",
                        "tokenAmount": {"amount": "700", "decimals": 2, "uiAmountString": "7"},
                    }
                }
            }
        }

        body = api.get(f"/api/token/{PUBKEY}/holders?limit=5").json()

        assert body["total"] == "10"
        assert body["limit"] == 1
        assert body["holders"] == [
            {"address": OTHER_PUBKEY, "amount": "7", "decimals": 2, "owner": PUBKEY, "isFrozen": True}
        ]

    def test_holders_unknown_mint(self, api):
        assert api.get(f"/api/token/{PUBKEY}/holders").status_code == 404

    def test_owner_accounts(self, api, chain):
        chain.token_accounts[PUBKEY] = [
            {
                "pubkey": OTHER_PUBKEY,
                "account": {
                    "data": {
                        "parsed": {
                            "info": {
                                "owner": PUBKEY,
                                "mint": "Mint",
                                "state": "initialized",
                                "tokenAmount": {"amount": "5", "decimals": 0, "uiAmountString": "5"},
                            }
                        }
                    }
                },
            }
        ]
        body = api.get(f"/api/tokens/{PUBKEY}/accounts").json()
        assert body[0]["address"] == OTHER_PUBKEY
        assert body[0]["amount"] == "5"


class TestPrograms:
    def test_pagination(self, api, chain):
        chain.program_accounts[PUBKEY] = [{"pubkey": f"acc{i}", "account": {}} for i in range(5)]
        body = api.get(f"/api/program/{PUBKEY}/accounts?limit=2&offset=2").json()
        assert body["programId"] == PUBKEY
        assert [a["pubkey"] for a in body["accounts"]] == ["acc2", "acc3"]
        assert body["pagination"] == {"total": 5, "limit": 2, "offset": 2, "hasMore": True}


class TestAnalytics:
    def test_overview(self, api):
        body = api.get("/api/analytics/overview").json()
        assert body["totalTransactions"] == 5_000_000
        assert body["activeWalletsToday"] == 500
        assert body["networkHealth"]["tps"] == 100.0
        assert body["networkHealth"]["blockTime"] == 400.0
        assert body["networkHealth"]["epochProgress"] == 25.0
        assert body["supply"] == {"total": 1000, "circulating": 800, "nonCirculating": 200}

    def test_network_health(self, api):
        body = api.get("/api/analytics/network/health").json()
        assert body["performance"]["networkLoad"] == 0.02
        assert body["epochInfo"]["slotsInEpoch"] == 432000

    def test_transaction_timeseries(self, api, chain, container):
        chain.transactions[SIGNATURE] = {"slot": 5, "blockTime": None, "meta": {"err": None}}
        api.get(f"/api/tx/{SIGNATURE}")
        drain(container)

        body = api.get("/api/analytics/transactions/timeseries?period=bogus").json()
        assert body["metadata"]["period"] == "day"
        assert body["data"][0]["total"] == 1
        assert body["data"][0]["successRate"] == 1.0

    def test_invalid_date(self, api):
        assert api.get("/api/analytics/users/timeseries?from=yesterday").status_code == 400

    def test_top_programs(self, api, chain, container):
        chain.transactions[SIGNATURE] = {
            "slot": 5,
            "meta": {"err": None},
            "transaction": {"message": {"accountKeys": ["Payer", "Prog"], "instructions": [{"programIdIndex": 1}]}},
        }
        api.get(f"/api/tx/{SIGNATURE}")
        drain(container)

        body = api.get("/api/analytics/programs/top").json()
        assert body["data"] == [{"programId": "Prog", "transactionCount": 1, "successRate": 100.0}]

    def test_token_volume_empty(self, api):
        body = api.get("/api/analytics/tokens/volume").json()
        assert body["tokens"] == []
        assert body["totalVolume"] == "0"
