"""Security utilities - bearer token handling."""

from src.marketplace.core.security.crypto import (
    AccessClaims,
    create_access_token,
    decode_access_token,
    decode_token,
)

__all__ = [
    "AccessClaims",
    "create_access_token",
    "decode_access_token",
    "decode_token",
]
