"""Chain RPC schemas - typed views over RPC results."""

from pydantic import BaseModel, ConfigDict, Field


class EpochInfoSchema(BaseModel):
    """Epoch progress."""

    model_config = ConfigDict(populate_by_name=True)

    epoch: int
    slot_index: int = Field(alias="slotIndex")
    slots_in_epoch: int = Field(alias="slotsInEpoch")
    absolute_slot: int = Field(alias="absoluteSlot")
    block_height: int | None = Field(alias="blockHeight", default=None)
    transaction_count: int | None = Field(alias="transactionCount", default=None)

    @property
    def progress(self) -> float:
        """Epoch completion in percent, two decimals."""
        if self.slots_in_epoch <= 0:
            return 0.0
        return round(self.slot_index / self.slots_in_epoch * 100, 2)


class SupplySchema(BaseModel):
    """Native token supply in lamports."""

    model_config = ConfigDict(populate_by_name=True)

    total: int
    circulating: int
    non_circulating: int = Field(alias="nonCirculating")


class PerformanceSampleSchema(BaseModel):
    """Transactions processed over a sample period."""

    model_config = ConfigDict(populate_by_name=True)

    slot: int
    num_transactions: int = Field(alias="numTransactions")
    num_slots: int = Field(alias="numSlots")
    sample_period_secs: int = Field(alias="samplePeriodSecs")

    @property
    def tps(self) -> float:
        if self.sample_period_secs <= 0:
            return 0.0
        return self.num_transactions / self.sample_period_secs


class BlockhashSchema(BaseModel):
    """Latest blockhash."""

    model_config = ConfigDict(populate_by_name=True)

    blockhash: str
    last_valid_block_height: int = Field(alias="lastValidBlockHeight")


class TokenAmountSchema(BaseModel):
    """Token amount as returned by token RPC methods."""

    model_config = ConfigDict(populate_by_name=True)

    amount: str
    decimals: int
    ui_amount: float | None = Field(alias="uiAmount", default=None)
    ui_amount_string: str | None = Field(alias="uiAmountString", default=None)


class TokenLargestAccountSchema(TokenAmountSchema):
    """Entry of getTokenLargestAccounts."""

    address: str


def average_tps(samples: list[dict]) -> float:
    """Mean TPS over performance samples, two decimals."""
    parsed = [PerformanceSampleSchema.model_validate(s) for s in samples]
    if not parsed:
        return 0.0
    return round(sum(s.tps for s in parsed) / len(parsed), 2)
