"""FastAPI application - routers under /api, lifespan-managed container."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app.container import Container
from app.repositories import Database
from rpc_client import ChainClient
from settings import CORS_ORIGINS, DB_PATH, RPC_URL
from web.api import accounts, analytics, network, programs, tokens, transactions
from web.api.errors import register_error_handlers

ROUTERS = [
    network.router,
    accounts.router,
    transactions.router,
    tokens.router,
    programs.router,
    analytics.router,
]


@asynccontextmanager
async def default_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the database and the RPC client, build the container."""
    db = Database(DB_PATH)
    db.connect()
    async with ChainClient(RPC_URL) as client:
        container = Container(db, client)
        app.state.container = container
        logger.info("Serving chain cache: rpc={}, db={}", RPC_URL, DB_PATH)
        try:
            yield
        finally:
            await container.aclose()


def create_app(container: Container | None = None) -> FastAPI:
    """Build the app; a prebuilt container skips the default lifespan."""
    if container is None:
        app = FastAPI(title="Chain RPC Cache", version="0.1.0", lifespan=default_lifespan)
    else:
        app = FastAPI(title="Chain RPC Cache", version="0.1.0")
        app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    for router in ROUTERS:
        app.include_router(router, prefix="/api")

    return app
