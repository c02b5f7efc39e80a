"""Repository layer - data access abstraction."""

from src.marketplace.repositories.base import BaseRepository
from src.marketplace.repositories.consultant import ConsultantProfileRepository
from src.marketplace.repositories.match import ProjectMatchRepository
from src.marketplace.repositories.project import ProjectRepository

__all__ = [
    "BaseRepository",
    "ConsultantProfileRepository",
    "ProjectMatchRepository",
    "ProjectRepository",
]
