"""Transaction API views - thin layer over TransactionService."""

from fastapi import APIRouter, Depends

from app.container import Container
from web.api.deps import get_container

from .schemas import CountResponse

router = APIRouter(prefix="/tx", tags=["transactions"])


@router.get("/count", response_model=CountResponse)
async def get_transaction_count(container: Container = Depends(get_container)):
    return {"count": await container.transactions.count()}


@router.get("/{signature}")
async def get_transaction(signature: str, container: Container = Depends(get_container)) -> dict:
    return await container.transactions.transaction(signature)


@router.get("/{signature}/status")
async def get_transaction_status(signature: str, container: Container = Depends(get_container)) -> dict:
    return await container.transactions.status(signature)
