"""Services layer - Business logic over the in-memory store."""

from autoflow.services.execution_service import ExecutionService
from autoflow.services.integration_service import IntegrationService
from autoflow.services.store import InMemoryStore, get_store
from autoflow.services.template_service import TemplateService
from autoflow.services.user_service import UserService
from autoflow.services.workflow_service import WorkflowService

__all__ = [
    "ExecutionService",
    "InMemoryStore",
    "IntegrationService",
    "TemplateService",
    "UserService",
    "WorkflowService",
    "get_store",
]
