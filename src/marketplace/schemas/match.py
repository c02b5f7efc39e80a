"""Match schemas for API request/response."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.marketplace.models.enums import MatchStatus
from src.marketplace.schemas.project import ProjectRead


class MatchRead(BaseModel):
    """Schema for reading a match."""

    id: UUID
    project_id: UUID
    consultant_id: UUID
    match_score: float
    rank: int
    status: MatchStatus
    proposal: str | None
    price: Decimal | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MatchWithProject(MatchRead):
    """A consultant's match together with the project it points at."""

    project: ProjectRead


class ProposalSubmit(BaseModel):
    """Consultant proposal for a pending match."""

    proposal: str = Field(min_length=1, max_length=10000)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)

    @field_validator("proposal")
    @classmethod
    def validate_proposal(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Proposal cannot be empty or whitespace only")
        return v


class MatchStatusUpdate(BaseModel):
    """Owner decision on a match."""

    status: MatchStatus

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: MatchStatus) -> MatchStatus:
        if v is MatchStatus.PENDING:
            raise ValueError("Status must be one of: accepted, rejected, completed")
        return v
