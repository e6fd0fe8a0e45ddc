"""SPL mint account layout (82 bytes)."""

import base64
import struct

import base58

# u32 option + pubkey, u64 supply, u8 decimals, bool initialized, u32 option + pubkey
_MINT_LAYOUT = struct.Struct("<I32sQBBI32s")


def decode_mint(address: str, data_b64: str) -> dict:
    """Decode a base64 mint account into its fields."""
    raw = base64.b64decode(data_b64)
    if len(raw) < _MINT_LAYOUT.size:
        raise ValueError(f"Mint {address}: expected {_MINT_LAYOUT.size} bytes, got {len(raw)}")
    mint_opt, mint_auth, supply, decimals, initialized, freeze_opt, freeze_auth = _MINT_LAYOUT.unpack_from(raw)
    return {
        "address": address,
        "supply": str(supply),
        "decimals": decimals,
        "isInitialized": bool(initialized),
        "mintAuthority": base58.b58encode(mint_auth).decode() if mint_opt else None,
        "freezeAuthority": base58.b58encode(freeze_auth).decode() if freeze_opt else None,
    }
