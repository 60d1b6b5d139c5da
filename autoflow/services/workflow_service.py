"""Workflow service.

Handles CRUD operations for workflows and cloning templates into workflows.
"""

import structlog

from autoflow.models.template import Template
from autoflow.models.workflow import (
    DEFAULT_WORKFLOW_STATUS,
    Workflow,
    WorkflowCreate,
    WorkflowUpdate,
    utc_now,
)
from autoflow.services.store import InMemoryStore

logger = structlog.get_logger()

# Explicit nulls for these are ignored on update
_NON_NULLABLE_FIELDS = frozenset({"name", "status", "actions"})


class WorkflowServiceError(Exception):
    """Error in workflow service operations."""

    pass


class WorkflowNotFoundError(WorkflowServiceError):
    """Workflow not found, or not owned by the requesting user."""

    pass


class WorkflowService:
    """Service for managing workflows.

    Handles:
    - Creating workflows from request data or templates
    - Reading and listing workflows
    - Updating workflow definitions
    - Deleting workflows
    - User-scoped access control

    Workflows owned by someone else are reported as not found so their
    existence is not disclosed.

    Example usage:
        service = WorkflowService(store)

        workflow = service.create(
            user_id="user-123",
            data=WorkflowCreate(name="Nightly sync", trigger="schedule"),
        )
    """

    def __init__(self, store: InMemoryStore) -> None:
        """Initialize workflow service.

        Args:
            store: In-memory record store
        """
        self._store = store

    def create(self, user_id: str, data: WorkflowCreate) -> Workflow:
        """Create a new workflow.

        Args:
            user_id: Owner user ID
            data: Workflow creation data

        Returns:
            Created workflow
        """
        workflow = Workflow(
            user_id=user_id,
            name=data.name,
            description=data.description,
            trigger=data.trigger,
            actions=list(data.actions or []),
            status=DEFAULT_WORKFLOW_STATUS,
        )
        self._store.workflows.append(workflow)

        logger.info(
            "workflow_created",
            workflow_id=workflow.id,
            user_id=user_id,
            action_count=len(workflow.actions),
        )
        return workflow

    def create_from_template(self, user_id: str, template: Template) -> Workflow:
        """Clone a template into a new active workflow.

        The first template trigger becomes the workflow trigger.
        """
        workflow = Workflow(
            user_id=user_id,
            name=template.name,
            description=template.description,
            trigger=template.triggers[0] if template.triggers else None,
            actions=list(template.actions),
            status=DEFAULT_WORKFLOW_STATUS,
            template_id=template.id,
        )
        self._store.workflows.append(workflow)

        logger.info(
            "workflow_created_from_template",
            workflow_id=workflow.id,
            template_id=template.id,
            user_id=user_id,
        )
        return workflow

    def get(self, workflow_id: str, user_id: str) -> Workflow:
        """Get a workflow.

        Raises:
            WorkflowNotFoundError: If workflow doesn't exist or belongs to another user
        """
        workflow = self._store.find_workflow(workflow_id)
        if workflow is None or workflow.user_id != user_id:
            raise WorkflowNotFoundError("Workflow not found")
        return workflow

    def list_all(
        self,
        user_id: str,
        status: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Workflow]:
        """List user's workflows in creation order.

        Args:
            user_id: User ID
            status: Filter by status
            limit: Maximum results
            offset: Pagination offset

        Returns:
            List of workflows
        """
        workflows = [w for w in self._store.workflows if w.user_id == user_id]
        if status:
            workflows = [w for w in workflows if w.status == status]
        return workflows[offset : offset + limit]

    def update(
        self,
        workflow_id: str,
        user_id: str,
        data: WorkflowUpdate,
    ) -> Workflow:
        """Apply a partial update to a workflow.

        Raises:
            WorkflowNotFoundError: If workflow doesn't exist or belongs to another user
        """
        workflow = self.get(workflow_id, user_id)

        changes = data.model_dump(exclude_unset=True)
        for field, value in changes.items():
            if value is None and field in _NON_NULLABLE_FIELDS:
                continue
            setattr(workflow, field, value)
        workflow.updated_at = utc_now()

        logger.info(
            "workflow_updated",
            workflow_id=workflow.id,
            fields=sorted(changes),
        )
        return workflow

    def delete(self, workflow_id: str, user_id: str) -> None:
        """Delete a workflow.

        Raises:
            WorkflowNotFoundError: If workflow doesn't exist or belongs to another user
        """
        workflow = self.get(workflow_id, user_id)
        self._store.workflows.remove(workflow)

        logger.info("workflow_deleted", workflow_id=workflow_id, user_id=user_id)

    def count(self, user_id: str) -> int:
        return sum(1 for w in self._store.workflows if w.user_id == user_id)
