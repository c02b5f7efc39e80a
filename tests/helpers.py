"""Test helper functions for common data creation patterns."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.marketplace.core.security import create_access_token
from src.marketplace.models import ConsultantProfile, Project, ProjectMatch
from src.marketplace.models.enums import PrincipalRole
from tests.factories import ConsultantProfileFactory, ProjectFactory, ProjectMatchFactory


def auth_headers(user_id: UUID, role: PrincipalRole) -> dict[str, str]:
    """Bearer header for a principal."""
    token = create_access_token(user_id, role.value)
    return {"Authorization": f"Bearer {token}"}


async def create_consultant(
    session: AsyncSession,
    **consultant_kwargs,
) -> ConsultantProfile:
    """Create and commit a consultant profile.

    Args:
        session: Database session
        **consultant_kwargs: Args passed to ConsultantProfileFactory

    Returns:
        Created consultant profile
    """
    consultant = ConsultantProfileFactory.build(**consultant_kwargs)
    session.add(consultant)
    await session.commit()
    return consultant


async def create_project_with_matches(
    session: AsyncSession,
    consultants: list[ConsultantProfile],
    **project_kwargs,
) -> tuple[Project, list[ProjectMatch]]:
    """Create a project and one pending match per consultant, bypassing the ranker.

    Returns:
        Tuple of (project, matches) in consultant order
    """
    project = ProjectFactory.build(**project_kwargs)
    session.add(project)
    await session.flush()

    matches = [
        ProjectMatchFactory.build(project_id=project.id, consultant_id=c.id)
        for c in consultants
    ]
    session.add_all(matches)
    await session.commit()
    return project, matches
