"""Project schemas for API request/response."""

from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.marketplace.models.enums import ProjectStatus


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Field cannot be empty or whitespace only")
    return v


def _naive_utc(v: datetime | None) -> datetime | None:
    """Store deadlines as naive UTC, like every other timestamp column."""
    if v is None or v.tzinfo is None:
        return v
    return v.astimezone(UTC).replace(tzinfo=None)


class ProjectCreate(BaseModel):
    """Schema for posting a project."""

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=5000)
    requirements: str = Field(min_length=1, max_length=5000)
    budget: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    deadline: datetime | None = None

    @field_validator("title", "description", "requirements")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return _strip_required(v)

    @field_validator("deadline")
    @classmethod
    def validate_deadline(cls, v: datetime | None) -> datetime | None:
        return _naive_utc(v)


class ProjectUpdate(BaseModel):
    """Partial update: only fields present in the request are applied.

    Text fields may be omitted but not set to null.
    """

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1, max_length=5000)
    requirements: str | None = Field(default=None, min_length=1, max_length=5000)
    budget: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    deadline: datetime | None = None

    @field_validator("title", "description", "requirements")
    @classmethod
    def validate_text(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Field cannot be null")
        return _strip_required(v)

    @field_validator("deadline")
    @classmethod
    def validate_deadline(cls, v: datetime | None) -> datetime | None:
        return _naive_utc(v)


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: UUID
    sme_id: UUID
    title: str
    description: str
    requirements: str
    budget: Decimal | None
    deadline: datetime | None
    status: ProjectStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
