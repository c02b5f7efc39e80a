"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.marketplace.api.dependencies.db import DBSession
from src.marketplace.repositories import (
    ConsultantProfileRepository,
    ProjectMatchRepository,
    ProjectRepository,
)


def get_project_repository(session: DBSession) -> ProjectRepository:
    """Get project repository."""
    return ProjectRepository(session)


def get_match_repository(session: DBSession) -> ProjectMatchRepository:
    """Get project match repository."""
    return ProjectMatchRepository(session)


def get_consultant_repository(session: DBSession) -> ConsultantProfileRepository:
    """Get consultant profile repository."""
    return ConsultantProfileRepository(session)


ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
MatchRepo = Annotated[ProjectMatchRepository, Depends(get_match_repository)]
ConsultantRepo = Annotated[ConsultantProfileRepository, Depends(get_consultant_repository)]
