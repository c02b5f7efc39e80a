"""Repository for ProjectMatch entity."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import col, select, update

from src.marketplace.models import MatchStatus, ProjectMatch
from src.marketplace.repositories.base import BaseRepository


class ProjectMatchRepository(BaseRepository[ProjectMatch]):
    """Repository for ProjectMatch entity."""

    model = ProjectMatch

    def add_all(self, matches: list[ProjectMatch]) -> None:
        """Add several matches to the session (no flush/commit)."""
        self.session.add_all(matches)

    async def list_by_project(self, project_id: UUID) -> list[ProjectMatch]:
        """List a project's matches in ranked order, best score first."""
        result = await self.session.execute(
            select(ProjectMatch)
            .where(ProjectMatch.project_id == project_id)
            .order_by(
                col(ProjectMatch.match_score).desc(),
                col(ProjectMatch.rank).asc(),
            )
        )
        return list(result.scalars().all())

    async def list_by_consultant(
        self,
        consultant_id: UUID,
        status: MatchStatus | None = None,
        cursor: str | None = None,
        limit: int = 50,
    ) -> tuple[list[ProjectMatch], str | None, bool]:
        """List a consultant's matches, newest first, with cursor-based pagination."""
        query = select(ProjectMatch).where(ProjectMatch.consultant_id == consultant_id)
        if status is not None:
            query = query.where(ProjectMatch.status == status.value)
        return await self.paginate(query, cursor, limit)

    async def reject_pending(
        self,
        project_id: UUID,
        now: datetime,
        exclude_id: UUID | None = None,
    ) -> int:
        """Reject every pending match of a project, optionally sparing one.

        Returns:
            Number of matches rejected
        """
        stmt = (
            update(ProjectMatch)
            .where(ProjectMatch.project_id == project_id)  # type: ignore[arg-type]
            .where(ProjectMatch.status == MatchStatus.PENDING.value)  # type: ignore[arg-type]
            .values(status=MatchStatus.REJECTED.value, updated_at=now)
        )
        if exclude_id is not None:
            stmt = stmt.where(ProjectMatch.id != exclude_id)  # type: ignore[arg-type]
        result = await self.session.execute(stmt)
        return result.rowcount or 0  # type: ignore[attr-defined]

    async def delete_by_project(self, project_id: UUID) -> int:
        """Delete all matches of a project (no commit)."""
        result = await self.session.execute(
            delete(ProjectMatch).where(ProjectMatch.project_id == project_id)  # type: ignore[arg-type]
        )
        return result.rowcount or 0  # type: ignore[attr-defined]
