"""Match endpoints.

Consultants browse their matches and submit proposals; project owners
accept, reject and complete them.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query

from src.marketplace.api.dependencies import CurrentConsultant, MatchServiceDep, SMEPrincipal
from src.marketplace.models import MatchStatus
from src.marketplace.schemas.match import (
    MatchRead,
    MatchStatusUpdate,
    MatchWithProject,
    ProposalSubmit,
)
from src.marketplace.schemas.pagination import PaginatedResponse
from src.marketplace.schemas.project import ProjectRead

router = APIRouter(prefix="/matches", tags=["matches"])


@router.get(
    "",
    response_model=PaginatedResponse[MatchWithProject],
    summary="List my matches",
    description="List the calling consultant's matches with their projects, newest first.",
    responses={
        200: {"description": "Paginated list of matches"},
        403: {"description": "Caller is not a consultant"},
    },
)
async def list_matches(
    consultant: CurrentConsultant,
    service: MatchServiceDep,
    status_filter: Annotated[
        MatchStatus | None, Query(alias="status", description="Filter by status")
    ] = None,
    cursor: Annotated[str | None, Query(description="Cursor for pagination")] = None,
    limit: Annotated[int, Query(ge=1, le=100, description="Max items to return")] = 50,
) -> PaginatedResponse[MatchWithProject]:
    items, next_cursor, has_more = await service.list_consultant_matches(
        consultant.id, status_filter, cursor, limit
    )
    return PaginatedResponse(
        items=[
            MatchWithProject(
                **MatchRead.model_validate(match).model_dump(),
                project=ProjectRead.model_validate(project),
            )
            for match, project in items
        ],
        next_cursor=next_cursor,
        has_more=has_more,
    )


@router.post(
    "/{match_id}/proposal",
    response_model=MatchRead,
    summary="Submit proposal",
    description="Attach a proposal and price to one of the caller's pending matches.",
    responses={
        200: {"description": "Proposal recorded"},
        403: {"description": "Match belongs to another consultant"},
        404: {"description": "Match not found"},
        409: {"description": "Match is no longer pending"},
        422: {"description": "Validation error"},
    },
)
async def submit_proposal(
    match_id: UUID,
    data: ProposalSubmit,
    consultant: CurrentConsultant,
    service: MatchServiceDep,
) -> MatchRead:
    match = await service.submit_proposal(match_id, consultant.id, data.proposal, data.price)
    return MatchRead.model_validate(match)


@router.patch(
    "/{match_id}/status",
    response_model=MatchRead,
    summary="Update match status",
    description=(
        "Accept, reject or complete a match. Accepting moves the project to "
        "in_progress and rejects the other pending matches; completing an "
        "accepted match completes the project."
    ),
    responses={
        200: {"description": "Match updated"},
        403: {"description": "Caller does not own the project"},
        404: {"description": "Match not found"},
        409: {"description": "Transition not allowed"},
        422: {"description": "Validation error"},
    },
)
async def update_match_status(
    match_id: UUID,
    data: MatchStatusUpdate,
    principal: SMEPrincipal,
    service: MatchServiceDep,
) -> MatchRead:
    match = await service.update_match_status(match_id, principal.user_id, data.status)
    return MatchRead.model_validate(match)
