"""Data models - in-memory records and API schemas."""

from autoflow.models.execution import Execution, ExecutionStatus
from autoflow.models.integration import Integration, IntegrationCreate
from autoflow.models.template import Template
from autoflow.models.user import (
    AuthResponse,
    TokenPayload,
    User,
    UserCreate,
    UserLogin,
    UserRead,
    UserRole,
)
from autoflow.models.workflow import (
    TemplateDeployment,
    Workflow,
    WorkflowCreate,
    WorkflowUpdate,
)

__all__ = [
    "AuthResponse",
    "Execution",
    "ExecutionStatus",
    "Integration",
    "IntegrationCreate",
    "Template",
    "TemplateDeployment",
    "TokenPayload",
    "User",
    "UserCreate",
    "UserLogin",
    "UserRead",
    "UserRole",
    "Workflow",
    "WorkflowCreate",
    "WorkflowUpdate",
]
