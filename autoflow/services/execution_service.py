"""Execution service.

Starts simulated workflow executions and tracks their state.
"""

import asyncio
import random

import structlog

from autoflow.models.execution import Execution, ExecutionStatus
from autoflow.services.store import InMemoryStore
from autoflow.services.workflow_service import WorkflowService

logger = structlog.get_logger()

# Strong references to pending completion tasks; the event loop only keeps weak ones
_background_tasks: set[asyncio.Task] = set()


class ExecutionServiceError(Exception):
    """Error in execution service operations."""

    pass


class ExecutionNotFoundError(ExecutionServiceError):
    """Execution not found, or not owned by the requesting user."""

    pass


class ExecutionService:
    """Service for managing simulated workflow executions.

    An execution is recorded as RUNNING and a fire-and-forget task flips it to
    COMPLETED after ``completion_delay`` seconds. The task is never cancelled;
    readers arriving before it fires observe RUNNING.

    Example usage:
        service = ExecutionService(store, workflow_service, completion_delay=2.0)

        execution = service.create_and_start(
            user_id="user-123",
            workflow_id="workflow-456",
        )
    """

    def __init__(
        self,
        store: InMemoryStore,
        workflow_service: WorkflowService,
        completion_delay: float,
    ) -> None:
        """Initialize execution service.

        Args:
            store: In-memory record store
            workflow_service: Workflow service instance
            completion_delay: Seconds until an execution is marked completed
        """
        self._store = store
        self._workflow_service = workflow_service
        self._completion_delay = completion_delay

    def create_and_start(self, user_id: str, workflow_id: str) -> Execution:
        """Create an execution and schedule its completion.

        Must be called from within a running event loop.

        Raises:
            WorkflowNotFoundError: If the workflow doesn't exist or belongs to another user
        """
        loop = asyncio.get_running_loop()
        workflow = self._workflow_service.get(workflow_id, user_id)

        execution = Execution(
            workflow_id=workflow.id,
            user_id=user_id,
            status=ExecutionStatus.RUNNING,
            logs=[f"Execution started for workflow: {workflow.name}"],
        )
        self._store.executions.append(execution)

        task = loop.create_task(
            self._complete_later(execution),
            name=f"execution-{execution.id}",
        )
        _background_tasks.add(task)
        task.add_done_callback(_background_tasks.discard)

        logger.info(
            "execution_started",
            execution_id=execution.id,
            workflow_id=workflow.id,
            user_id=user_id,
        )
        return execution

    async def _complete_later(self, execution: Execution) -> None:
        await asyncio.sleep(self._completion_delay)
        execution.mark_completed(processed_items=random.randint(1, 50))

        logger.info(
            "execution_completed",
            execution_id=execution.id,
            workflow_id=execution.workflow_id,
            duration_ms=execution.duration_ms,
        )

    def get(self, execution_id: str, user_id: str) -> Execution:
        """Get an execution.

        Raises:
            ExecutionNotFoundError: If execution doesn't exist or belongs to another user
        """
        execution = self._store.find_execution(execution_id)
        if execution is None or execution.user_id != user_id:
            raise ExecutionNotFoundError("Execution not found")
        return execution

    def list_all(
        self,
        user_id: str,
        workflow_id: str | None = None,
    ) -> list[Execution]:
        """List user's executions, optionally for a single workflow."""
        executions = [e for e in self._store.executions if e.user_id == user_id]
        if workflow_id is not None:
            executions = [e for e in executions if e.workflow_id == workflow_id]
        return executions

    def count(self, user_id: str) -> int:
        return sum(1 for e in self._store.executions if e.user_id == user_id)
