from src.marketplace.schemas.match import (
    MatchRead,
    MatchStatusUpdate,
    MatchWithProject,
    ProposalSubmit,
)
from src.marketplace.schemas.pagination import PaginatedResponse
from src.marketplace.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate

__all__ = [
    # Match
    "MatchRead",
    "MatchStatusUpdate",
    "MatchWithProject",
    "ProposalSubmit",
    # Pagination
    "PaginatedResponse",
    # Project
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
]
