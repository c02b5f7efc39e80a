"""Repository for ConsultantProfile entity (read-only)."""

from uuid import UUID

from sqlmodel import col, select

from src.marketplace.models import ConsultantProfile
from src.marketplace.repositories.base import BaseRepository


class ConsultantProfileRepository(BaseRepository[ConsultantProfile]):
    """Read access to consultant profiles owned by the identity service."""

    model = ConsultantProfile

    async def get_by_user_id(self, user_id: UUID) -> ConsultantProfile | None:
        """Get the consultant profile belonging to a user."""
        result = await self.session.execute(
            select(ConsultantProfile).where(ConsultantProfile.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def list_candidates(self) -> list[ConsultantProfile]:
        """Snapshot of the consultant pool for ranking, in a stable order.

        Loaded with one query; replace with a pre-filtered query to narrow
        the pool without touching the scorer.
        """
        result = await self.session.execute(
            select(ConsultantProfile).order_by(
                col(ConsultantProfile.created_at).asc(),
                col(ConsultantProfile.id).asc(),
            )
        )
        return list(result.scalars().all())
