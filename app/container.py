"""Dependency Injection container - built once per application lifespan."""

from collections.abc import Callable
from datetime import datetime

from loguru import logger

from app.repositories import AnalyticsRepository, CacheRepository, Database
from app.services import (
    AccountService,
    AnalyticsService,
    NetworkService,
    ProgramService,
    ReadThroughCache,
    TokenService,
    TransactionService,
)
from app.services.cache import utcnow
from rpc_client import ChainClient
from settings import CACHE_WRITE_WORKERS


class Container:
    """Holds the repositories, the cache and the per-domain services."""

    def __init__(
        self,
        db: Database,
        client: ChainClient,
        *,
        clock: Callable[[], datetime] = utcnow,
        write_workers: int = CACHE_WRITE_WORKERS,
    ):
        self.db = db
        self.client = client

        # Repositories
        self.cache_repo = CacheRepository(db)
        self.analytics_repo = AnalyticsRepository(db)

        # Cache
        self.cache = ReadThroughCache(self.cache_repo, clock=clock, write_workers=write_workers)

        # Services (with injected client and cache)
        self.network = NetworkService(client, self.cache)
        self.accounts = AccountService(client, self.cache)
        self.transactions = TransactionService(client, self.cache)
        self.tokens = TokenService(client, self.cache)
        self.programs = ProgramService(client, self.cache)
        self.analytics = AnalyticsService(client, self.cache, self.analytics_repo)

        logger.debug("Container initialized")

    async def aclose(self) -> None:
        """Flush pending cache writes and release the database."""
        await self.cache.close()
        self.db.close()
        logger.info("Container closed")
