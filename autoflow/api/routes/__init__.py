"""API route handlers."""

from autoflow.api.routes.auth import router as auth_router
from autoflow.api.routes.executions import router as executions_router
from autoflow.api.routes.integrations import router as integrations_router
from autoflow.api.routes.system import router as system_router
from autoflow.api.routes.templates import router as templates_router
from autoflow.api.routes.workflows import router as workflows_router

__all__ = [
    "auth_router",
    "executions_router",
    "integrations_router",
    "system_router",
    "templates_router",
    "workflows_router",
]
