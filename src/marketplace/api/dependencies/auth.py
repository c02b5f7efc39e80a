"""Authentication and authorization dependencies.

Bearer tokens are issued by the identity service. Their ``sub`` claim is the
acting user and their ``role`` claim is the marketplace side the user is on.
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status

from src.marketplace.api.dependencies.repositories import ConsultantRepo
from src.marketplace.core.logging import bind_principal_context
from src.marketplace.core.security import decode_access_token
from src.marketplace.models import ConsultantProfile, PrincipalRole


@dataclass(frozen=True)
class Principal:
    """Authenticated caller."""

    user_id: UUID
    role: PrincipalRole


async def get_current_principal(
    authorization: Annotated[str | None, Header()] = None,
) -> Principal:
    """Validate the bearer token and return the calling principal."""
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid authorization header",
        )

    claims = decode_access_token(authorization[7:])
    if claims is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    try:
        role = PrincipalRole(claims.role)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unknown role in token",
        ) from e

    bind_principal_context(claims.subject, role.value)
    return Principal(user_id=claims.subject, role=role)


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]


async def require_sme(principal: CurrentPrincipal) -> Principal:
    """Require the caller to be an SME (project owner side)."""
    if principal.role is not PrincipalRole.SME:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="SME account required for this operation",
        )
    return principal


SMEPrincipal = Annotated[Principal, Depends(require_sme)]


async def get_current_consultant(
    principal: CurrentPrincipal,
    consultant_repo: ConsultantRepo,
) -> ConsultantProfile:
    """Require a consultant caller and return their profile."""
    if principal.role is not PrincipalRole.CONSULTANT:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Consultant account required for this operation",
        )

    profile = await consultant_repo.get_by_user_id(principal.user_id)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Consultant profile not found",
        )
    return profile


CurrentConsultant = Annotated[ConsultantProfile, Depends(get_current_consultant)]
