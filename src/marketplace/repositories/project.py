"""Repository for Project entity."""

from collections.abc import Iterable
from uuid import UUID

from sqlmodel import col, select

from src.marketplace.models import Project, ProjectStatus
from src.marketplace.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project

    async def get_for_update(self, project_id: UUID) -> Project | None:
        """Get a project and lock its row until the transaction ends.

        Serializes lifecycle changes on one project. The lock is a no-op on
        backends without SELECT ... FOR UPDATE (SQLite).
        """
        result = await self.session.execute(
            select(Project)
            .where(Project.id == project_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_many(self, project_ids: Iterable[UUID]) -> dict[UUID, Project]:
        """Load several projects at once, keyed by id."""
        ids = set(project_ids)
        if not ids:
            return {}
        result = await self.session.execute(select(Project).where(col(Project.id).in_(ids)))
        return {project.id: project for project in result.scalars().all()}

    async def list_by_owner(
        self,
        sme_id: UUID,
        status: ProjectStatus | None = None,
        cursor: str | None = None,
        limit: int = 50,
    ) -> tuple[list[Project], str | None, bool]:
        """List an SME's projects, newest first, with cursor-based pagination.

        Args:
            sme_id: Owning SME
            status: Optional status filter
            cursor: Optional cursor for pagination
            limit: Maximum number of results

        Returns:
            Tuple of (items, next_cursor, has_more)
        """
        query = select(Project).where(Project.sme_id == sme_id)
        if status is not None:
            query = query.where(Project.status == status.value)
        return await self.paginate(query, cursor, limit)
