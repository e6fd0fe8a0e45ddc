"""Network models - slots, blocks, fees, validators."""

from app.models.network.block import BLOCK_DDL, BLOCK_TABLE
from app.models.network.fee import FEE_DDL, FEE_TABLE
from app.models.network.slot import SLOT_DDL, SLOT_TABLE
from app.models.network.validator import VALIDATOR_DDL, VALIDATOR_TABLE

__all__ = [
    "SLOT_DDL",
    "SLOT_TABLE",
    "BLOCK_DDL",
    "BLOCK_TABLE",
    "FEE_DDL",
    "FEE_TABLE",
    "VALIDATOR_DDL",
    "VALIDATOR_TABLE",
]
