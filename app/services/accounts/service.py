"""Account service - account info, balances, signatures, batch lookups."""

from app.errors import InvalidKeyError, NotFoundError
from app.services.cache import ReadThroughCache, ResourceKind
from app.validation import clamp_limit, validate_pubkey
from rpc_client import ChainClient

LAMPORTS_PER_SOL = 1_000_000_000
MAX_BATCH = 100


def format_account(info: dict) -> dict:
    """RPC account with base64 data flattened and rentEpoch as a string."""
    data = info.get("data")
    return {
        **info,
        "data": data[0] if isinstance(data, list) else data,
        "rentEpoch": str(info["rentEpoch"]) if info.get("rentEpoch") is not None else None,
    }


class AccountService:
    """Account reads; only account info is cached."""

    def __init__(self, client: ChainClient, cache: ReadThroughCache):
        self._client = client
        self._cache = cache

    async def account_info(self, pubkey: str) -> dict:
        validate_pubkey(pubkey)

        async def fetch() -> dict:
            info = await self._client.get_account_info(pubkey)
            if info is None:
                raise NotFoundError("Account not found")
            return format_account(info)

        return await self._cache.resolve(ResourceKind.ACCOUNT, pubkey, fetch)

    async def balance(self, pubkey: str) -> dict:
        validate_pubkey(pubkey)
        lamports = await self._client.get_balance(pubkey)
        return {"lamports": lamports, "sol": lamports / LAMPORTS_PER_SOL}

    async def signatures(
        self,
        pubkey: str,
        limit: int | None = None,
        before: str | None = None,
        until: str | None = None,
    ) -> dict:
        """Signature history with cursor pagination metadata."""
        validate_pubkey(pubkey)
        limit = clamp_limit(limit, default=10, maximum=1000)
        signatures = await self._client.get_signatures_for_address(pubkey, limit, before, until)
        return {
            "data": signatures,
            "pagination": {
                "limit": limit,
                "hasMore": len(signatures) == limit,
                "before": before,
                "until": until,
                "nextCursor": signatures[-1]["signature"] if signatures else None,
                "prevCursor": signatures[0]["signature"] if signatures else None,
            },
            "count": len(signatures),
        }

    async def batch(self, pubkeys: list[str]) -> list[dict]:
        if not pubkeys:
            raise InvalidKeyError("pubkeys array is required")
        if len(pubkeys) > MAX_BATCH:
            raise InvalidKeyError(f"Maximum {MAX_BATCH} pubkeys allowed")
        for pubkey in pubkeys:
            validate_pubkey(pubkey)

        infos = await self._client.get_multiple_accounts(pubkeys)
        return [
            {"pubkey": pubkey, "account": format_account(info) if info else None}
            for pubkey, info in zip(pubkeys, infos, strict=False)
        ]
