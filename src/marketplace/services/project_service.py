"""Project service: posting, editing and removing projects.

Posting a project ranks the consultant pool and persists the resulting
pending matches in the same transaction as the project row.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.marketplace.core.exceptions import (
    InvalidStateTransitionError,
    MarketplaceError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from src.marketplace.core.logging import get_logger
from src.marketplace.matching.lifecycle import ensure_project_transition
from src.marketplace.matching.ranker import MAX_CANDIDATES, MIN_MATCH_SCORE, rank_matches
from src.marketplace.models import (
    MatchStatus,
    Project,
    ProjectMatch,
    ProjectStatus,
)
from src.marketplace.models.base import utc_now
from src.marketplace.repositories import (
    ConsultantProfileRepository,
    ProjectMatchRepository,
    ProjectRepository,
)
from src.marketplace.schemas.project import ProjectCreate, ProjectUpdate

logger = get_logger(__name__)

_REQUIRED_TEXT_FIELDS = ("title", "description", "requirements")


class ProjectService:
    """Service for SME-facing project operations."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        match_repo: ProjectMatchRepository,
        consultant_repo: ConsultantProfileRepository,
        session: AsyncSession,
        min_score: float = MIN_MATCH_SCORE,
        max_candidates: int = MAX_CANDIDATES,
    ):
        self.project_repo = project_repo
        self.match_repo = match_repo
        self.consultant_repo = consultant_repo
        self.session = session
        self.min_score = min_score
        self.max_candidates = max_candidates

    async def create_project(self, owner_id: UUID, data: ProjectCreate) -> Project:
        """Create a project and generate its consultant matches.

        The project and all of its matches are committed together; if any
        insert fails nothing is persisted.
        """
        try:
            project = Project(
                sme_id=owner_id,
                title=data.title,
                description=data.description,
                requirements=data.requirements,
                budget=data.budget,
                deadline=data.deadline,
                status=ProjectStatus.OPEN.value,
            )
            self.project_repo.add(project)
            await self.session.flush()

            matches = await self._generate_matches(project)

            await self.session.commit()
            await self.session.refresh(project)

            logger.info(
                "Project created",
                project_id=str(project.id),
                sme_id=str(owner_id),
                match_count=len(matches),
            )
            return project

        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to create project", error=str(e))
            raise

    async def _generate_matches(self, project: Project) -> list[ProjectMatch]:
        """Rank the consultant pool for a project and stage pending matches."""
        pool = await self.consultant_repo.list_candidates()
        ranked = rank_matches(
            project,
            pool,
            min_score=self.min_score,
            limit=self.max_candidates,
        )

        now = utc_now()
        matches = [
            ProjectMatch(
                project_id=project.id,
                consultant_id=candidate.consultant_id,
                match_score=candidate.score,
                rank=position,
                status=MatchStatus.PENDING.value,
                created_at=now,
                updated_at=now,
            )
            for position, candidate in enumerate(ranked, start=1)
        ]
        self.match_repo.add_all(matches)
        await self.session.flush()

        logger.info(
            "Matches generated",
            project_id=str(project.id),
            pool_size=len(pool),
            match_count=len(matches),
        )
        return matches

    async def get_project(self, project_id: UUID) -> Project:
        """Get a project by ID."""
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError(f"Project {project_id} not found")
        return project

    async def get_owned_project(self, project_id: UUID, owner_id: UUID) -> Project:
        """Get a project, requiring the caller to own it."""
        project = await self.get_project(project_id)
        if project.sme_id != owner_id:
            raise PermissionDeniedError("You do not have permission to access this project")
        return project

    async def list_projects(
        self,
        owner_id: UUID,
        status: ProjectStatus | None,
        cursor: str | None,
        limit: int,
    ) -> tuple[list[Project], str | None, bool]:
        """List an SME's projects with cursor-based pagination.

        Returns:
            Tuple of (items, next_cursor, has_more)
        """
        return await self.project_repo.list_by_owner(owner_id, status, cursor, limit)

    async def list_project_matches(self, project_id: UUID, owner_id: UUID) -> list[ProjectMatch]:
        """List a project's matches, best score first (owner only)."""
        await self.get_owned_project(project_id, owner_id)
        return await self.match_repo.list_by_project(project_id)

    async def update_project(
        self, project_id: UUID, owner_id: UUID, data: ProjectUpdate
    ) -> Project:
        """Apply a partial update to an open project.

        Only fields set in ``data`` are written. Matches are left untouched:
        their scores are fixed when the project is posted.
        """
        try:
            project = await self.get_owned_project(project_id, owner_id)

            if project.status_enum is not ProjectStatus.OPEN:
                raise InvalidStateTransitionError("project", project.status, "updated")

            update_data = data.model_dump(exclude_unset=True)
            for field in _REQUIRED_TEXT_FIELDS:
                if field in update_data and update_data[field] is None:
                    raise ValidationError(f"Project {field} cannot be null")

            for field, value in update_data.items():
                setattr(project, field, value)

            project.updated_at = utc_now()
            await self.session.commit()
            await self.session.refresh(project)

            logger.info(
                "Project updated",
                project_id=str(project_id),
                fields=sorted(update_data),
            )
            return project

        except MarketplaceError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to update project", project_id=str(project_id), error=str(e))
            raise

    async def cancel_project(self, project_id: UUID, owner_id: UUID) -> Project:
        """Cancel an open project and reject its pending matches."""
        try:
            project = await self.project_repo.get_for_update(project_id)
            if project is None:
                raise NotFoundError(f"Project {project_id} not found")
            if project.sme_id != owner_id:
                raise PermissionDeniedError("You do not have permission to cancel this project")

            ensure_project_transition(project.status_enum, ProjectStatus.CANCELLED)

            now = utc_now()
            project.status = ProjectStatus.CANCELLED.value
            project.updated_at = now
            rejected = await self.match_repo.reject_pending(project.id, now)

            await self.session.commit()
            await self.session.refresh(project)

            logger.info(
                "Project cancelled",
                project_id=str(project_id),
                rejected_matches=rejected,
            )
            return project

        except MarketplaceError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to cancel project", project_id=str(project_id), error=str(e))
            raise

    async def delete_project(self, project_id: UUID, owner_id: UUID) -> None:
        """Delete a project together with its matches."""
        try:
            project = await self.get_owned_project(project_id, owner_id)

            deleted_matches = await self.match_repo.delete_by_project(project.id)
            await self.project_repo.delete(project)
            await self.session.commit()

            logger.info(
                "Project deleted",
                project_id=str(project_id),
                deleted_matches=deleted_matches,
            )

        except MarketplaceError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to delete project", project_id=str(project_id), error=str(e))
            raise
