"""Request key validation."""

import base58

from app.errors import InvalidKeyError

PUBKEY_LENGTH = 32
SIGNATURE_LENGTH = 64


def _decoded_length(value: str) -> int | None:
    try:
        return len(base58.b58decode(value))
    except ValueError:
        return None


def validate_pubkey(value: str) -> str:
    """Base58 public key of 32 bytes."""
    if not value or _decoded_length(value) != PUBKEY_LENGTH:
        raise InvalidKeyError(f"Invalid public key: {value}")
    return value


def validate_signature(value: str) -> str:
    """Base58 transaction signature of 64 bytes."""
    if not value or _decoded_length(value) != SIGNATURE_LENGTH:
        raise InvalidKeyError(f"Invalid transaction signature: {value}")
    return value


def parse_slot(value: str) -> int:
    """Non-negative slot number."""
    try:
        slot = int(value)
    except (TypeError, ValueError):
        raise InvalidKeyError("Invalid slot number") from None
    if slot < 0:
        raise InvalidKeyError("Invalid slot number")
    return slot


def clamp_limit(value: int | str | None, default: int, maximum: int) -> int:
    """Positive limit capped at `maximum`; unparsable or non-positive values fall back to `default`."""
    try:
        limit = int(value) if value is not None else default
    except (TypeError, ValueError):
        return default
    if limit <= 0:
        return default
    return min(limit, maximum)
