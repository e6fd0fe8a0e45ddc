"""Program API views - thin layer over ProgramService."""

from fastapi import APIRouter, Depends, Query

from app.container import Container
from web.api.deps import get_container

from .schemas import ProgramAccountsResponse

router = APIRouter(prefix="/program", tags=["programs"])


@router.get("/{program_id}/accounts", response_model=ProgramAccountsResponse)
async def get_program_accounts(
    program_id: str,
    datasize: int | None = None,
    data_slice: int | None = Query(None, alias="slice"),
    limit: str | None = None,
    offset: int | None = None,
    container: Container = Depends(get_container),
):
    return await container.programs.accounts(program_id, datasize, data_slice, limit, offset)
