"""Analytics API views - thin layer over AnalyticsService."""

from fastapi import APIRouter, Depends, Query

from app.container import Container
from web.api.deps import get_container

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/overview")
async def get_overview(container: Container = Depends(get_container)) -> dict:
    return await container.analytics.overview()


@router.get("/network/health")
async def get_network_health(container: Container = Depends(get_container)) -> dict:
    return await container.analytics.network_health()


@router.get("/transactions/timeseries")
async def get_transaction_timeseries(
    period: str | None = None,
    from_: str | None = Query(None, alias="from"),
    to: str | None = None,
    limit: str | None = None,
    container: Container = Depends(get_container),
) -> dict:
    return await container.analytics.transaction_timeseries(period, from_, to, limit)


@router.get("/users/timeseries")
async def get_user_timeseries(
    period: str | None = None,
    from_: str | None = Query(None, alias="from"),
    to: str | None = None,
    container: Container = Depends(get_container),
) -> dict:
    return await container.analytics.user_timeseries(period, from_, to)


@router.get("/tokens/volume")
async def get_token_volume(limit: str | None = None, container: Container = Depends(get_container)) -> dict:
    return await container.analytics.token_volume(limit)


@router.get("/programs/top")
async def get_top_programs(
    period: str | None = None,
    limit: str | None = None,
    container: Container = Depends(get_container),
) -> dict:
    return await container.analytics.top_programs(period, limit)
