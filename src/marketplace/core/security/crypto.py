"""Bearer token utilities.

Tokens are issued by the identity service and signed with the shared JWT
secret. This service only verifies them; ``create_access_token`` exists for
local development and tests.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

from jose import JWTError, jwt

from src.marketplace.core.config import get_settings

ACCESS_TOKEN_TYPE = "access"


@dataclass(frozen=True)
class AccessClaims:
    """Claims this service relies on."""

    subject: UUID
    role: str


def create_access_token(
    subject: str | UUID,
    role: str,
    expires_delta: timedelta | None = None,
) -> str:
    settings = get_settings()
    expire = datetime.now(UTC) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    claims = {
        "sub": str(subject),
        "role": role,
        "exp": expire,
        "type": ACCESS_TOKEN_TYPE,
    }
    return jwt.encode(  # type: ignore[no-any-return]
        claims,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> dict[str, Any] | None:
    """Verify signature and expiry. Returns None on any error."""
    settings = get_settings()
    try:
        return jwt.decode(  # type: ignore[no-any-return]
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None


def decode_access_token(token: str) -> AccessClaims | None:
    """Decode an access token into its subject and role.

    Returns None when the token is invalid, expired, not an access token,
    or lacks a UUID subject or a role.
    """
    payload = decode_token(token)
    if payload is None or payload.get("type") != ACCESS_TOKEN_TYPE:
        return None

    role = payload.get("role")
    if not isinstance(role, str):
        return None
    try:
        subject = UUID(str(payload.get("sub")))
    except ValueError:
        return None
    return AccessClaims(subject=subject, role=role)
