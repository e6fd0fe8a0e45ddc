"""Token services."""

from app.services.tokens.mint_layout import decode_mint
from app.services.tokens.service import TokenService

__all__ = [
    "TokenService",
    "decode_mint",
]
