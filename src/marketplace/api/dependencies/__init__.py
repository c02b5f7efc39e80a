"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

# Auth
from src.marketplace.api.dependencies.auth import (
    CurrentConsultant,
    CurrentPrincipal,
    Principal,
    SMEPrincipal,
    get_current_consultant,
    get_current_principal,
    require_sme,
)

# Database
from src.marketplace.api.dependencies.db import DBSession, get_db_session

# Repositories
from src.marketplace.api.dependencies.repositories import (
    ConsultantRepo,
    MatchRepo,
    ProjectRepo,
    get_consultant_repository,
    get_match_repository,
    get_project_repository,
)

# Services
from src.marketplace.api.dependencies.services import (
    MatchServiceDep,
    ProjectServiceDep,
    get_match_service,
    get_project_service,
)

__all__ = [
    # Auth
    "CurrentConsultant",
    "CurrentPrincipal",
    "Principal",
    "SMEPrincipal",
    "get_current_consultant",
    "get_current_principal",
    "require_sme",
    # Database
    "DBSession",
    "get_db_session",
    # Repositories
    "ConsultantRepo",
    "MatchRepo",
    "ProjectRepo",
    "get_consultant_repository",
    "get_match_repository",
    "get_project_repository",
    # Services
    "MatchServiceDep",
    "ProjectServiceDep",
    "get_match_service",
    "get_project_service",
]
