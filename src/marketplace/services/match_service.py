"""Match lifecycle service.

Consultants write proposals on pending matches; project owners move matches
through pending -> accepted -> completed or pending -> rejected. Accepting a
match moves the project to in_progress and rejects the remaining pending
matches in one transaction, under a row lock on the project.
"""

from decimal import Decimal
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.marketplace.core.exceptions import (
    MarketplaceError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from src.marketplace.core.logging import get_logger
from src.marketplace.matching.lifecycle import (
    PROJECT_CASCADE,
    ensure_match_transition,
    ensure_project_transition,
    ensure_proposal_allowed,
)
from src.marketplace.models import MatchStatus, Project, ProjectMatch
from src.marketplace.models.base import utc_now
from src.marketplace.repositories import ProjectMatchRepository, ProjectRepository

logger = get_logger(__name__)


class MatchService:
    """Service for match queries and status transitions."""

    def __init__(
        self,
        match_repo: ProjectMatchRepository,
        project_repo: ProjectRepository,
        session: AsyncSession,
    ):
        self.match_repo = match_repo
        self.project_repo = project_repo
        self.session = session

    async def list_consultant_matches(
        self,
        consultant_id: UUID,
        status: MatchStatus | None,
        cursor: str | None,
        limit: int,
    ) -> tuple[list[tuple[ProjectMatch, Project]], str | None, bool]:
        """List a consultant's matches with their projects, newest first.

        Returns:
            Tuple of (items, next_cursor, has_more) where items are
            (match, project) pairs
        """
        matches, next_cursor, has_more = await self.match_repo.list_by_consultant(
            consultant_id, status, cursor, limit
        )
        projects = await self.project_repo.get_many(m.project_id for m in matches)
        items = [(m, projects[m.project_id]) for m in matches if m.project_id in projects]
        return items, next_cursor, has_more

    async def submit_proposal(
        self,
        match_id: UUID,
        consultant_id: UUID,
        proposal: str,
        price: Decimal,
    ) -> ProjectMatch:
        """Attach a proposal and price to a pending match.

        Raises:
            NotFoundError: match does not exist
            PermissionDeniedError: match belongs to another consultant
            InvalidStateTransitionError: match is no longer pending
            ValidationError: blank proposal or negative price
        """
        try:
            match = await self.match_repo.get_by_id(match_id)
            if match is None:
                raise NotFoundError(f"Match {match_id} not found")
            if match.consultant_id != consultant_id:
                raise PermissionDeniedError(
                    "You do not have permission to submit a proposal for this match"
                )

            ensure_proposal_allowed(match.status_enum)

            proposal = proposal.strip()
            if not proposal:
                raise ValidationError("Proposal cannot be empty")
            if price < 0:
                raise ValidationError("Price cannot be negative")

            match.proposal = proposal
            match.price = price
            match.updated_at = utc_now()
            await self.session.commit()
            await self.session.refresh(match)

            logger.info(
                "Proposal submitted",
                match_id=str(match_id),
                consultant_id=str(consultant_id),
            )
            return match

        except MarketplaceError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to submit proposal", match_id=str(match_id), error=str(e))
            raise

    async def update_match_status(
        self,
        match_id: UUID,
        owner_id: UUID,
        new_status: MatchStatus,
    ) -> ProjectMatch:
        """Move a match to accepted, rejected or completed.

        The parent project row is locked before any state is checked, so two
        concurrent accepts on one project serialize and the second fails.

        Side effects, committed together with the match:
        - accepted: project -> in_progress, other pending matches -> rejected
        - completed: project -> completed

        Raises:
            NotFoundError: match does not exist
            PermissionDeniedError: caller does not own the project
            InvalidStateTransitionError: transition not legal from the current
                match or project status
        """
        try:
            match = await self.match_repo.get_by_id(match_id)
            if match is None:
                raise NotFoundError(f"Match {match_id} not found")

            project = await self.project_repo.get_for_update(match.project_id)
            if project is None:
                raise NotFoundError(f"Project {match.project_id} not found")
            if project.sme_id != owner_id:
                raise PermissionDeniedError("You do not have permission to update this match")

            # Re-read under the project lock; a competing transition may have committed
            await self.session.refresh(match)

            ensure_match_transition(match.status_enum, new_status)
            project_status = PROJECT_CASCADE.get(new_status)
            if project_status is not None:
                ensure_project_transition(project.status_enum, project_status)

            previous = match.status
            now = utc_now()
            match.status = new_status.value
            match.updated_at = now

            rejected = 0
            if project_status is not None:
                project.status = project_status.value
                project.updated_at = now
            if new_status is MatchStatus.ACCEPTED:
                rejected = await self.match_repo.reject_pending(
                    project.id, now, exclude_id=match.id
                )

            await self.session.commit()
            await self.session.refresh(match)

            logger.info(
                "Match status updated",
                match_id=str(match_id),
                project_id=str(project.id),
                from_status=previous,
                to_status=new_status.value,
                rejected_siblings=rejected,
            )
            return match

        except MarketplaceError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to update match status", match_id=str(match_id), error=str(e))
            raise
