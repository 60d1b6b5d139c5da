"""Execution API endpoints.

Starts simulated workflow executions and reports their status.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, HTTPException, Query, status

from autoflow.api.deps import CurrentUser, ExecutionServiceDep
from autoflow.models.execution import Execution
from autoflow.services.execution_service import ExecutionNotFoundError
from autoflow.services.workflow_service import WorkflowNotFoundError

logger = structlog.get_logger()

router = APIRouter()


@router.get("", response_model=list[Execution])
async def list_executions(
    user: CurrentUser,
    service: ExecutionServiceDep,
    workflow_id: Annotated[str | None, Query()] = None,
) -> list[Execution]:
    """List user's executions.

    Args:
        user: Current authenticated user
        service: Execution service
        workflow_id: Filter by workflow

    Returns:
        List of executions
    """
    return service.list_all(user_id=user.sub, workflow_id=workflow_id)


@router.post(
    "/{workflow_id}",
    response_model=Execution,
    status_code=status.HTTP_201_CREATED,
)
async def start_execution(
    workflow_id: str,
    user: CurrentUser,
    service: ExecutionServiceDep,
) -> Execution:
    """Start a simulated execution of a workflow.

    The execution is returned in the running state and completes in the
    background after the configured delay.

    Args:
        workflow_id: Workflow to execute
        user: Current authenticated user
        service: Execution service

    Returns:
        Created execution
    """
    logger.info(
        "execution_requested",
        user_id=user.sub,
        workflow_id=workflow_id,
    )

    try:
        return service.create_and_start(user_id=user.sub, workflow_id=workflow_id)
    except WorkflowNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e


@router.get("/{execution_id}", response_model=Execution)
async def get_execution(
    execution_id: str,
    user: CurrentUser,
    service: ExecutionServiceDep,
) -> Execution:
    """Get an execution by ID."""
    try:
        return service.get(execution_id=execution_id, user_id=user.sub)
    except ExecutionNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
