"""Account API views - thin layer over AccountService."""

from fastapi import APIRouter, Depends

from app.container import Container
from web.api.deps import get_container

from .schemas import BalanceResponse, BatchItem, BatchRequest, SignaturesResponse

router = APIRouter(tags=["accounts"])


@router.get("/balance/{pubkey}", response_model=BalanceResponse)
async def get_balance(pubkey: str, container: Container = Depends(get_container)):
    return await container.accounts.balance(pubkey)


@router.get("/account/{pubkey}/info")
async def get_account_info(pubkey: str, container: Container = Depends(get_container)) -> dict:
    return await container.accounts.account_info(pubkey)


@router.get("/account/{pubkey}/transactions", response_model=SignaturesResponse)
async def get_account_transactions(
    pubkey: str,
    limit: str | None = None,
    before: str | None = None,
    until: str | None = None,
    container: Container = Depends(get_container),
):
    return await container.accounts.signatures(pubkey, limit, before, until)


@router.post("/account/batch", response_model=list[BatchItem])
async def post_account_batch(body: BatchRequest, container: Container = Depends(get_container)):
    return await container.accounts.batch(body.pubkeys)
