"""Network API views - thin layer over NetworkService."""

from fastapi import APIRouter, Depends

from app.container import Container
from app.validation import parse_slot
from web.api.deps import get_container

from .schemas import FeesResponse, HealthResponse, SlotResponse

router = APIRouter(tags=["network"])


@router.get("/health", response_model=HealthResponse)
async def get_health(container: Container = Depends(get_container)):
    return await container.network.health()


@router.get("/slot", response_model=SlotResponse)
async def get_slot(container: Container = Depends(get_container)):
    return {"slot": await container.network.current_slot()}


@router.get("/block/latest")
async def get_latest_block(container: Container = Depends(get_container)) -> dict:
    return await container.network.latest_block()


@router.get("/block/{slot}")
async def get_block(slot: str, container: Container = Depends(get_container)) -> dict:
    return await container.network.block(parse_slot(slot))


@router.get("/fees/latest", response_model=FeesResponse)
async def get_latest_fees(container: Container = Depends(get_container)):
    return await container.network.latest_fees()


@router.get("/validators")
async def get_validators(container: Container = Depends(get_container)) -> list[dict]:
    return await container.network.validators()
