"""Program API response schemas."""

from web.api.schemas import CamelModel


class Pagination(CamelModel):
    total: int
    limit: int
    offset: int
    has_more: bool


class ProgramAccountsResponse(CamelModel):
    program_id: str
    accounts: list[dict]
    pagination: Pagination
