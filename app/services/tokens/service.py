"""Token service - mints, owner token accounts, supply, largest holders."""

from decimal import Decimal

from loguru import logger

from app.errors import NotFoundError
from app.services.cache import ReadThroughCache, ResourceKind, token_holders_key
from app.services.formatting import iso_now
from app.services.tokens.mint_layout import decode_mint
from app.validation import clamp_limit, validate_pubkey
from rpc_client import ChainClient
from rpc_client.chain.schemas import TokenLargestAccountSchema
from settings import MINT_SIZE, TOKEN_PROGRAM_ID

DEFAULT_HOLDERS_LIMIT = 100
MAX_HOLDERS_LIMIT = 1000


def format_token_account(item: dict) -> dict:
    """jsonParsed token account -> flat row."""
    info = item["account"]["data"]["parsed"]["info"]
    amount = info.get("tokenAmount", {})
    return {
        "address": item["pubkey"],
        "owner": info["owner"],
        "mint": info.get("mint"),
        "amount": amount.get("amount"),
        "decimals": amount.get("decimals"),
        "uiAmountString": amount.get("uiAmountString"),
        "state": info.get("state"),
    }


class TokenService:
    """Token reads through the cache."""

    def __init__(
        self,
        client: ChainClient,
        cache: ReadThroughCache,
        token_program_id: str = TOKEN_PROGRAM_ID,
        mint_size: int = MINT_SIZE,
    ):
        self._client = client
        self._cache = cache
        self.token_program_id = token_program_id
        self.mint_size = mint_size

    async def mints(self) -> dict:
        """All mint accounts of the token program."""

        async def fetch() -> list[dict]:
            accounts = await self._client.get_program_accounts(
                self.token_program_id, filters=[{"dataSize": self.mint_size}]
            )
            mints = []
            for acc in accounts:
                try:
                    mints.append(decode_mint(acc["pubkey"], acc["account"]["data"][0]))
                except ValueError as e:
                    logger.warning("Skipping undecodable mint: {}", e)
            return mints

        tokens = await self._cache.resolve_many(
            ResourceKind.TOKEN_MINTS,
            fetch,
            key_of=lambda m: m["address"],
            order_by="mint_address",
        )
        return {
            "tokens": tokens,
            "count": len(tokens),
            "supplyGreater0": sum(1 for t in tokens if t["supply"] != "0"),
        }

    async def accounts_by_owner(self, owner: str) -> list[dict]:
        validate_pubkey(owner)

        async def fetch() -> list[dict]:
            accounts = await self._client.get_token_accounts_by_owner(owner, self.token_program_id)
            return [format_token_account(a) for a in accounts]

        return await self._cache.resolve_many(
            ResourceKind.TOKEN_ACCOUNTS,
            fetch,
            key_of=lambda a: a["address"],
            where="owner_address = ?",
            params=[owner],
            order_by="account_address",
        )

    async def supply(self, mint: str) -> dict:
        validate_pubkey(mint)

        async def fetch() -> dict:
            supply = await self._client.get_token_supply(mint)
            if supply is None:
                raise NotFoundError("Token not found")
            return {**supply, "mint": mint}

        return await self._cache.resolve(ResourceKind.TOKEN_SUPPLY, mint, fetch)

    async def holders(self, mint: str, limit: int | None = None) -> dict:
        """Largest holders of a mint with owner and frozen state."""
        validate_pubkey(mint)
        limit = clamp_limit(limit, DEFAULT_HOLDERS_LIMIT, MAX_HOLDERS_LIMIT)

        async def fetch() -> dict:
            raw = await self._client.get_token_largest_accounts(mint)
            if not raw:
                raise NotFoundError("Token not found")
            accounts = [TokenLargestAccountSchema.model_validate(a) for a in raw]
            largest = accounts[:limit]
            infos = await self._client.get_multiple_accounts([a.address for a in largest], encoding="jsonParsed")
            holders = []
            for account, info in zip(largest, infos, strict=False):
                if info is None:
                    continue
                parsed = info["data"]["parsed"]["info"]
                holders.append(
                    {
                        "address": account.address,
                        "amount": parsed["tokenAmount"]["uiAmountString"],
                        "decimals": parsed["tokenAmount"]["decimals"],
                        "owner": parsed["owner"],
                        "isFrozen": parsed.get("state") == "frozen",
                    }
                )
            total = sum((Decimal(a.ui_amount_string or "0") for a in accounts), Decimal(0))
            return {
                "mint": mint,
                "holders": holders,
                "total": str(total),
                "limit": len(holders),
                "lastUpdated": iso_now(),
            }

        return await self._cache.resolve(ResourceKind.TOKEN_HOLDERS, token_holders_key(mint, limit), fetch)

