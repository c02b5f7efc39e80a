"""Project endpoints.

SMEs post projects here; posting a project generates its consultant
matches. Only the owning SME may edit, cancel or delete a project or see
its matches.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from src.marketplace.api.dependencies import CurrentPrincipal, ProjectServiceDep, SMEPrincipal
from src.marketplace.models import ProjectStatus
from src.marketplace.schemas.match import MatchRead
from src.marketplace.schemas.pagination import PaginatedResponse
from src.marketplace.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    description="Post a project and match it against the consultant pool.",
    responses={
        201: {"description": "Project created, matches generated"},
        403: {"description": "Caller is not an SME"},
        422: {"description": "Validation error"},
    },
)
async def create_project(
    data: ProjectCreate,
    principal: SMEPrincipal,
    service: ProjectServiceDep,
) -> ProjectRead:
    project = await service.create_project(principal.user_id, data)
    return ProjectRead.model_validate(project)


@router.get(
    "",
    response_model=PaginatedResponse[ProjectRead],
    summary="List projects",
    description="List the caller's projects, newest first, with cursor-based pagination.",
    responses={
        200: {"description": "Paginated list of projects"},
        403: {"description": "Caller is not an SME"},
    },
)
async def list_projects(
    principal: SMEPrincipal,
    service: ProjectServiceDep,
    status_filter: Annotated[
        ProjectStatus | None, Query(alias="status", description="Filter by status")
    ] = None,
    cursor: Annotated[str | None, Query(description="Cursor for pagination")] = None,
    limit: Annotated[int, Query(ge=1, le=100, description="Max items to return")] = 50,
) -> PaginatedResponse[ProjectRead]:
    projects, next_cursor, has_more = await service.list_projects(
        principal.user_id, status_filter, cursor, limit
    )
    return PaginatedResponse(
        items=[ProjectRead.model_validate(p) for p in projects],
        next_cursor=next_cursor,
        has_more=has_more,
    )


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses={
        200: {"description": "Project details"},
        404: {"description": "Project not found"},
    },
)
async def get_project(
    project_id: UUID,
    _principal: CurrentPrincipal,
    service: ProjectServiceDep,
) -> ProjectRead:
    """Get a project by ID."""
    project = await service.get_project(project_id)
    return ProjectRead.model_validate(project)


@router.patch(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update project",
    description="Partially update an open project. Existing matches are kept as scored.",
    responses={
        200: {"description": "Project updated"},
        403: {"description": "Caller does not own the project"},
        404: {"description": "Project not found"},
        409: {"description": "Project is no longer open"},
        422: {"description": "Validation error"},
    },
)
async def update_project(
    project_id: UUID,
    data: ProjectUpdate,
    principal: SMEPrincipal,
    service: ProjectServiceDep,
) -> ProjectRead:
    project = await service.update_project(project_id, principal.user_id, data)
    return ProjectRead.model_validate(project)


@router.post(
    "/{project_id}/cancel",
    response_model=ProjectRead,
    summary="Cancel project",
    description="Cancel an open project. Its pending matches are rejected.",
    responses={
        200: {"description": "Project cancelled"},
        403: {"description": "Caller does not own the project"},
        404: {"description": "Project not found"},
        409: {"description": "Project is not open"},
    },
)
async def cancel_project(
    project_id: UUID,
    principal: SMEPrincipal,
    service: ProjectServiceDep,
) -> ProjectRead:
    project = await service.cancel_project(project_id, principal.user_id)
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    description="Delete a project and all of its matches.",
    responses={
        204: {"description": "Project deleted"},
        403: {"description": "Caller does not own the project"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(
    project_id: UUID,
    principal: SMEPrincipal,
    service: ProjectServiceDep,
) -> None:
    await service.delete_project(project_id, principal.user_id)


@router.get(
    "/{project_id}/matches",
    response_model=list[MatchRead],
    summary="List project matches",
    description="List the consultants matched to a project, best score first.",
    responses={
        200: {"description": "Matches for the project"},
        403: {"description": "Caller does not own the project"},
        404: {"description": "Project not found"},
    },
)
async def list_project_matches(
    project_id: UUID,
    principal: SMEPrincipal,
    service: ProjectServiceDep,
) -> list[MatchRead]:
    matches = await service.list_project_matches(project_id, principal.user_id)
    return [MatchRead.model_validate(m) for m in matches]
