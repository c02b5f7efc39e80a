"""ProjectMatch model - scored, stateful link between a project and a consultant."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4

from sqlalchemy import Index, UniqueConstraint
from sqlmodel import Field, SQLModel

from src.marketplace.models.base import utc_now
from src.marketplace.models.enums import MatchStatus


class ProjectMatch(SQLModel, table=True):
    """Match record created by the ranker.

    ``match_score`` and ``rank`` are fixed at creation and never recomputed.
    """

    __tablename__ = "project_matches"
    __table_args__ = (
        UniqueConstraint("project_id", "consultant_id", name="uq_project_matches_pair"),
        Index("ix_project_matches_consultant_created", "consultant_id", "created_at"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", ondelete="CASCADE", index=True)
    consultant_id: UUID = Field(foreign_key="consultant_profiles.id", index=True)
    match_score: float
    # 1-based position in the ranked list; breaks ties between equal rounded scores
    rank: int = Field(default=1, ge=1)
    status: str = Field(default=MatchStatus.PENDING.value, max_length=20)
    proposal: str | None = Field(default=None, max_length=10000)
    price: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def status_enum(self) -> MatchStatus:
        """Get status as MatchStatus enum."""
        return MatchStatus(self.status)
