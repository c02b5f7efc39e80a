"""Consultant profile model - owned by the identity service, read by matching."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4

from sqlalchemy import Column
from sqlmodel import Field, SQLModel

from src.marketplace.models.base import StringListType, utc_now


class ConsultantProfile(SQLModel, table=True):
    """Consultant profile.

    Only ``expertise`` and ``experience_years`` feed the scorer; the rest is
    carried for display.
    """

    __tablename__ = "consultant_profiles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(unique=True, index=True)
    full_name: str = Field(max_length=100)
    headline: str = Field(max_length=200)
    bio: str = Field(default="", max_length=5000)
    expertise: list[str] = Field(
        default_factory=list,
        sa_column=Column(StringListType, nullable=False),
    )
    experience_years: int = Field(default=0, ge=0)
    certifications: list[str] = Field(
        default_factory=list,
        sa_column=Column(StringListType, nullable=False),
    )
    hourly_rate: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)
    availability: str | None = Field(default=None, max_length=100)
    location: str | None = Field(default=None, max_length=200)
    languages: list[str] = Field(
        default_factory=list,
        sa_column=Column(StringListType, nullable=False),
    )
    portfolio_links: list[str] = Field(
        default_factory=list,
        sa_column=Column(StringListType, nullable=False),
    )
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
