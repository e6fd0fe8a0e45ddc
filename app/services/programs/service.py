"""Program service - accounts owned by a program."""

from app.services.cache import ReadThroughCache, ResourceKind, program_accounts_key
from app.validation import clamp_limit, validate_pubkey
from rpc_client import ChainClient

DEFAULT_LIMIT = 100
MAX_LIMIT = 1000


class ProgramService:
    def __init__(self, client: ChainClient, cache: ReadThroughCache):
        self._client = client
        self._cache = cache

    async def accounts(
        self,
        program_id: str,
        datasize: int | None = None,
        data_slice: int | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> dict:
        """Program accounts page with pagination metadata.

        `datasize` filters on account size; `data_slice` returns only the
        first N bytes of each account's data.
        """
        validate_pubkey(program_id)
        limit = clamp_limit(limit, DEFAULT_LIMIT, MAX_LIMIT)
        offset = max(int(offset or 0), 0)
        key = program_accounts_key(program_id, datasize, data_slice, limit, offset)

        async def fetch() -> dict:
            filters = [{"dataSize": datasize}] if datasize is not None else None
            slice_ = {"offset": 0, "length": data_slice} if data_slice is not None else None
            accounts = await self._client.get_program_accounts(program_id, filters=filters, data_slice=slice_)
            page = accounts[offset : offset + limit]
            return {
                "programId": program_id,
                "accounts": page,
                "pagination": {
                    "total": len(accounts),
                    "limit": limit,
                    "offset": offset,
                    "hasMore": offset + limit < len(accounts),
                },
            }

        return await self._cache.resolve(ResourceKind.PROGRAM_ACCOUNTS, key, fetch)
