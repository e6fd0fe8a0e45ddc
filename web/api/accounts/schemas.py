"""Account API schemas."""

from pydantic import BaseModel, Field

from web.api.schemas import CamelModel


class BalanceResponse(CamelModel):
    lamports: int
    sol: float


class SignaturePagination(CamelModel):
    limit: int
    has_more: bool
    before: str | None = None
    until: str | None = None
    next_cursor: str | None = None
    prev_cursor: str | None = None


class SignaturesResponse(CamelModel):
    """Signature history page."""

    data: list[dict]
    pagination: SignaturePagination
    count: int


class BatchRequest(BaseModel):
    """Batch account lookup body."""

    pubkeys: list[str] = Field(default_factory=list)


class BatchItem(CamelModel):
    pubkey: str
    account: dict | None = None
