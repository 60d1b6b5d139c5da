"""Workflow API endpoints.

Handles workflow CRUD operations scoped to the authenticated user.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from autoflow.api.deps import CurrentUser, WorkflowServiceDep
from autoflow.models.workflow import Workflow, WorkflowCreate, WorkflowUpdate
from autoflow.services.workflow_service import WorkflowNotFoundError

router = APIRouter()


@router.get("", response_model=list[Workflow])
async def list_workflows(
    user: CurrentUser,
    service: WorkflowServiceDep,
    status_filter: Annotated[str | None, Query(alias="status")] = None,
    limit: Annotated[int, Query(ge=1, le=100)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[Workflow]:
    """List user's workflows.

    Args:
        user: Current authenticated user
        service: Workflow service
        status_filter: Filter by workflow status
        limit: Maximum number of results
        offset: Pagination offset

    Returns:
        List of workflows
    """
    return service.list_all(
        user_id=user.sub,
        status=status_filter,
        limit=limit,
        offset=offset,
    )


@router.post("", response_model=Workflow, status_code=status.HTTP_201_CREATED)
async def create_workflow(
    user: CurrentUser,
    service: WorkflowServiceDep,
    data: WorkflowCreate,
) -> Workflow:
    """Create a new workflow."""
    return service.create(user_id=user.sub, data=data)


@router.get("/{workflow_id}", response_model=Workflow)
async def get_workflow(
    workflow_id: str,
    user: CurrentUser,
    service: WorkflowServiceDep,
) -> Workflow:
    """Get a workflow by ID."""
    try:
        return service.get(workflow_id=workflow_id, user_id=user.sub)
    except WorkflowNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e


@router.put("/{workflow_id}", response_model=Workflow)
async def update_workflow(
    workflow_id: str,
    user: CurrentUser,
    service: WorkflowServiceDep,
    data: WorkflowUpdate,
) -> Workflow:
    """Update a workflow.

    Only the fields present in the request body are changed.
    """
    try:
        return service.update(
            workflow_id=workflow_id,
            user_id=user.sub,
            data=data,
        )
    except WorkflowNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e


@router.delete("/{workflow_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workflow(
    workflow_id: str,
    user: CurrentUser,
    service: WorkflowServiceDep,
) -> None:
    """Delete a workflow."""
    try:
        service.delete(workflow_id=workflow_id, user_id=user.sub)
    except WorkflowNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
