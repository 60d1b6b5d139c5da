"""Template service.

Lists the template catalog and deploys templates into workflows.
"""

import structlog

from autoflow.models.template import Template
from autoflow.models.workflow import Workflow
from autoflow.services.store import InMemoryStore
from autoflow.services.workflow_service import WorkflowService

logger = structlog.get_logger()


class TemplateServiceError(Exception):
    """Error in template service operations."""

    pass


class TemplateNotFoundError(TemplateServiceError):
    """Template not found."""

    pass


class TemplateService:
    """Service for the read-only template catalog."""

    def __init__(self, store: InMemoryStore, workflow_service: WorkflowService) -> None:
        """Initialize template service.

        Args:
            store: In-memory record store
            workflow_service: Used to create workflows on deploy
        """
        self._store = store
        self._workflow_service = workflow_service

    def list_all(self, category: str | None = None) -> list[Template]:
        """List templates, optionally restricted to one category (case-insensitive)."""
        if category is None:
            return list(self._store.templates)
        wanted = category.casefold()
        return [t for t in self._store.templates if t.category.casefold() == wanted]

    def get(self, template_id: str) -> Template:
        """Get a template.

        Raises:
            TemplateNotFoundError: If template doesn't exist
        """
        template = self._store.find_template(template_id)
        if template is None:
            raise TemplateNotFoundError("Template not found")
        return template

    def deploy(self, template_id: str, user_id: str) -> Workflow:
        """Create a workflow for the user from a template.

        Raises:
            TemplateNotFoundError: If template doesn't exist
        """
        template = self.get(template_id)
        workflow = self._workflow_service.create_from_template(user_id, template)

        logger.info(
            "template_deployed",
            template_id=template_id,
            workflow_id=workflow.id,
            user_id=user_id,
        )
        return workflow

    def count(self) -> int:
        return len(self._store.templates)
