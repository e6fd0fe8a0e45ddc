"""Network service - slots, blocks, fees, validators, node health."""

import asyncio
from statistics import median

from loguru import logger

from app.errors import NotFoundError, UpstreamUnavailableError
from app.services.cache import (
    CURRENT_SLOT_KEY,
    LATEST_FEES_KEY,
    ReadThroughCache,
    ResourceKind,
    block_key,
)
from app.services.formatting import iso_from_unix, iso_now
from rpc_client import ChainClient, RpcError
from rpc_client.chain.schemas import BlockhashSchema


def format_block(slot: int, block: dict) -> dict:
    """RPC block + its slot and a formatted block time."""
    return {
        **block,
        "slot": slot,
        "blockTime": block.get("blockTime"),
        "blockHeight": block.get("blockHeight"),
        "blockTimeFormatted": iso_from_unix(block.get("blockTime")),
    }


def summarize_fees(fees: list[dict]) -> dict:
    """Min/median/max of recent prioritization fees (micro-lamports per CU)."""
    values = [f["prioritizationFee"] for f in fees]
    if not values:
        return {"min": 0, "median": 0, "max": 0, "samples": 0}
    return {"min": min(values), "median": median(values), "max": max(values), "samples": len(values)}


class NetworkService:
    """Chain-tip reads through the cache."""

    def __init__(self, client: ChainClient, cache: ReadThroughCache):
        self._client = client
        self._cache = cache

    async def health(self) -> dict:
        """Node health (never cached)."""
        try:
            result = await self._client.get_health()
        except RpcError as e:
            logger.warning("Node health check failed: {}", e)
            raise UpstreamUnavailableError("Node is unhealthy", details=e.message) from e
        return {"status": "ok", "node": result}

    async def current_slot(self) -> int:
        async def fetch() -> dict:
            return {"slot": await self._client.get_slot()}

        data = await self._cache.resolve(ResourceKind.SLOT, CURRENT_SLOT_KEY, fetch)
        return data["slot"]

    async def _fetch_block(self, slot: int) -> dict:
        block = await self._client.get_block(slot)
        if block is None:
            raise NotFoundError("Block not found")
        return format_block(slot, block)

    async def block(self, slot: int) -> dict:
        return await self._cache.resolve(ResourceKind.BLOCK, block_key(slot), lambda: self._fetch_block(slot))

    async def latest_block(self) -> dict:
        """Block at the (cached) current slot, kept for the fast TTL."""
        slot = await self.current_slot()
        return await self._cache.resolve(
            ResourceKind.LATEST_BLOCK, block_key(slot), lambda: self._fetch_block(slot)
        )

    async def latest_fees(self) -> dict:
        async def fetch() -> dict:
            raw_blockhash, slot, fees = await asyncio.gather(
                self._client.get_latest_blockhash(),
                self._client.get_slot(),
                self._client.get_recent_prioritization_fees(),
            )
            blockhash = BlockhashSchema.model_validate(raw_blockhash)
            return {
                "slot": slot,
                "blockhash": blockhash.blockhash,
                "lastValidBlockHeight": blockhash.last_valid_block_height,
                "prioritizationFees": summarize_fees(fees),
                "lastUpdated": iso_now(),
            }

        return await self._cache.resolve(ResourceKind.FEES, LATEST_FEES_KEY, fetch)

    async def validators(self) -> list[dict]:
        return await self._cache.resolve_many(
            ResourceKind.VALIDATORS,
            self._client.get_cluster_nodes,
            key_of=lambda node: node["pubkey"],
            order_by="pubkey",
        )
