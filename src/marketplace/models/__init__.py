"""Model exports.

Import from here: `from src.marketplace.models import Project, ProjectMatch`
"""

from src.marketplace.models.consultant import ConsultantProfile
from src.marketplace.models.enums import MatchStatus, PrincipalRole, ProjectStatus
from src.marketplace.models.match import ProjectMatch
from src.marketplace.models.project import Project

__all__ = [
    # Enums
    "MatchStatus",
    "PrincipalRole",
    "ProjectStatus",
    # Models
    "ConsultantProfile",
    "Project",
    "ProjectMatch",
]
