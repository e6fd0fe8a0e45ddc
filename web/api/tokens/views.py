"""Token API views - thin layer over TokenService."""

from fastapi import APIRouter, Depends

from app.container import Container
from web.api.deps import get_container

from .schemas import HoldersResponse, MintsResponse, SupplyResponse, TokenAccountItem

router = APIRouter(tags=["tokens"])


@router.get("/tokens/mints", response_model=MintsResponse)
async def get_token_mints(container: Container = Depends(get_container)):
    return await container.tokens.mints()


@router.get("/tokens/{owner}/accounts", response_model=list[TokenAccountItem])
async def get_token_accounts(owner: str, container: Container = Depends(get_container)):
    return await container.tokens.accounts_by_owner(owner)


@router.get("/token/{mint}/supply", response_model=SupplyResponse)
async def get_token_supply(mint: str, container: Container = Depends(get_container)):
    return await container.tokens.supply(mint)


@router.get("/token/{mint}/holders", response_model=HoldersResponse)
async def get_token_holders(mint: str, limit: str | None = None, container: Container = Depends(get_container)):
    return await container.tokens.holders(mint, limit)
