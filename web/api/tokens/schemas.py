"""Token API response schemas."""

from web.api.schemas import CamelModel


class MintItem(CamelModel):
    address: str
    supply: str
    decimals: int
    is_initialized: bool
    mint_authority: str | None = None
    freeze_authority: str | None = None


class MintsResponse(CamelModel):
    tokens: list[MintItem]
    count: int
    supply_greater0: int


class TokenAccountItem(CamelModel):
    address: str
    owner: str
    mint: str | None = None
    amount: str | None = None
    decimals: int | None = None
    ui_amount_string: str | None = None
    state: str | None = None


class SupplyResponse(CamelModel):
    """Token supply of a mint."""

    mint: str
    amount: str
    decimals: int
    ui_amount: float | None = None
    ui_amount_string: str | None = None


class HolderItem(CamelModel):
    address: str
    amount: str | None = None
    decimals: int
    owner: str
    is_frozen: bool


class HoldersResponse(CamelModel):
    """Largest holders of a mint."""

    mint: str
    holders: list[HolderItem]
    total: str
    limit: int
    last_updated: str
