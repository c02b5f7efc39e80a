"""Initial migration

Revision ID: 001
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel
from sqlalchemy.dialects import postgresql

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

StringList = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    # 1. Consultant profiles (written by the identity service, read by matching)
    op.create_table(
        "consultant_profiles",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("full_name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("headline", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("bio", sqlmodel.sql.sqltypes.AutoString(length=5000), nullable=False),
        sa.Column("expertise", StringList, nullable=False),
        sa.Column("experience_years", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("certifications", StringList, nullable=False),
        sa.Column("hourly_rate", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("availability", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column("location", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=True),
        sa.Column("languages", StringList, nullable=False),
        sa.Column("portfolio_links", StringList, nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_consultant_profiles_user_id", "consultant_profiles", ["user_id"], unique=True
    )

    # 2. Projects
    op.create_table(
        "projects",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("sme_id", sa.Uuid(), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("description", sqlmodel.sql.sqltypes.AutoString(length=5000), nullable=False),
        sa.Column("requirements", sqlmodel.sql.sqltypes.AutoString(length=5000), nullable=False),
        sa.Column("budget", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("deadline", sa.DateTime(), nullable=True),
        sa.Column(
            "status",
            sqlmodel.sql.sqltypes.AutoString(length=20),
            nullable=False,
            server_default="open",
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_projects_sme_id", "projects", ["sme_id"], unique=False)
    op.create_index("ix_projects_sme_created", "projects", ["sme_id", "created_at"], unique=False)

    # 3. Project matches
    op.create_table(
        "project_matches",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("project_id", sa.Uuid(), nullable=False),
        sa.Column("consultant_id", sa.Uuid(), nullable=False),
        sa.Column("match_score", sa.Float(), nullable=False),
        sa.Column("rank", sa.Integer(), nullable=False, server_default="1"),
        sa.Column(
            "status",
            sqlmodel.sql.sqltypes.AutoString(length=20),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("proposal", sqlmodel.sql.sqltypes.AutoString(length=10000), nullable=True),
        sa.Column("price", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["consultant_id"], ["consultant_profiles.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("project_id", "consultant_id", name="uq_project_matches_pair"),
    )
    op.create_index(
        "ix_project_matches_project_id", "project_matches", ["project_id"], unique=False
    )
    op.create_index(
        "ix_project_matches_consultant_id", "project_matches", ["consultant_id"], unique=False
    )
    op.create_index(
        "ix_project_matches_consultant_created",
        "project_matches",
        ["consultant_id", "created_at"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_project_matches_consultant_created", table_name="project_matches")
    op.drop_index("ix_project_matches_consultant_id", table_name="project_matches")
    op.drop_index("ix_project_matches_project_id", table_name="project_matches")
    op.drop_table("project_matches")

    op.drop_index("ix_projects_sme_created", table_name="projects")
    op.drop_index("ix_projects_sme_id", table_name="projects")
    op.drop_table("projects")

    op.drop_index("ix_consultant_profiles_user_id", table_name="consultant_profiles")
    op.drop_table("consultant_profiles")
