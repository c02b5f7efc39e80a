"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.marketplace.api.dependencies.db import DBSession
from src.marketplace.api.dependencies.repositories import ConsultantRepo, MatchRepo, ProjectRepo
from src.marketplace.core.config import get_settings
from src.marketplace.services.match_service import MatchService
from src.marketplace.services.project_service import ProjectService


def get_project_service(
    project_repo: ProjectRepo,
    match_repo: MatchRepo,
    consultant_repo: ConsultantRepo,
    session: DBSession,
) -> ProjectService:
    """Get project service with matching limits from settings."""
    settings = get_settings()
    return ProjectService(
        project_repo,
        match_repo,
        consultant_repo,
        session,
        min_score=settings.match_min_score,
        max_candidates=settings.match_max_candidates,
    )


def get_match_service(
    match_repo: MatchRepo,
    project_repo: ProjectRepo,
    session: DBSession,
) -> MatchService:
    """Get match service."""
    return MatchService(match_repo, project_repo, session)


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
MatchServiceDep = Annotated[MatchService, Depends(get_match_service)]
