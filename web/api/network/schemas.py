"""Network API response schemas."""

from web.api.schemas import CamelModel


class HealthResponse(CamelModel):
    status: str
    node: str


class SlotResponse(CamelModel):
    slot: int


class FeeSummary(CamelModel):
    min: int
    median: float
    max: int
    samples: int


class FeesResponse(CamelModel):
    """Latest blockhash and prioritization fees."""

    slot: int
    blockhash: str
    last_valid_block_height: int
    prioritization_fees: FeeSummary
    last_updated: str
