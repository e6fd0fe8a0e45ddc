"""Transaction service - transactions, signature statuses, counts."""

from app.errors import NotFoundError
from app.services.cache import ReadThroughCache, ResourceKind
from app.services.formatting import iso_now
from app.validation import validate_signature
from rpc_client import ChainClient


class TransactionService:
    """Transaction reads through the cache."""

    def __init__(self, client: ChainClient, cache: ReadThroughCache):
        self._client = client
        self._cache = cache

    async def transaction(self, signature: str) -> dict:
        validate_signature(signature)

        async def fetch() -> dict:
            tx = await self._client.get_transaction(signature)
            if tx is None:
                raise NotFoundError("Transaction not found")
            return tx

        return await self._cache.resolve(ResourceKind.TRANSACTION, signature, fetch)

    async def status(self, signature: str) -> dict:
        validate_signature(signature)

        async def fetch() -> dict:
            status = await self._client.get_signature_status(signature)
            if status is None:
                raise NotFoundError("Transaction not found")
            return {**status, "signature": signature, "lastUpdated": iso_now()}

        return await self._cache.resolve(ResourceKind.TRANSACTION_STATUS, signature, fetch)

    async def count(self) -> int:
        return await self._client.get_transaction_count()
