"""Project model - posted by an SME, matched against the consultant pool."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4

from sqlalchemy import Index
from sqlmodel import Field, SQLModel

from src.marketplace.models.base import utc_now
from src.marketplace.models.enums import ProjectStatus


class Project(SQLModel, table=True):
    """Project entity.

    ``sme_id`` is the identity of the owning SME as issued by the identity
    service; it never changes after creation. ``status`` is only moved by
    the match lifecycle and by cancellation.
    """

    __tablename__ = "projects"
    __table_args__ = (Index("ix_projects_sme_created", "sme_id", "created_at"),)

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    sme_id: UUID = Field(index=True)
    title: str = Field(max_length=200)
    description: str = Field(max_length=5000)
    requirements: str = Field(max_length=5000)
    budget: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)
    deadline: datetime | None = Field(default=None)
    status: str = Field(default=ProjectStatus.OPEN.value, max_length=20)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def status_enum(self) -> ProjectStatus:
        """Get status as ProjectStatus enum."""
        return ProjectStatus(self.status)

    @property
    def matching_text(self) -> str:
        """Free text the keyword extractor runs over."""
        return f"{self.title} {self.description} {self.requirements}"
