from src.marketplace.services.match_service import MatchService
from src.marketplace.services.project_service import ProjectService

__all__ = ["MatchService", "ProjectService"]
