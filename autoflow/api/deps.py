"""API dependencies for FastAPI dependency injection.

Provides the record store, the authenticated principal, and service instances.
"""

from typing import Annotated

import structlog
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from autoflow.config import settings
from autoflow.core.security import InvalidTokenError, decode_access_token
from autoflow.models.user import TokenPayload
from autoflow.services.execution_service import ExecutionService
from autoflow.services.integration_service import IntegrationService
from autoflow.services.store import InMemoryStore, get_store
from autoflow.services.template_service import TemplateService
from autoflow.services.user_service import UserService
from autoflow.services.workflow_service import WorkflowService

logger = structlog.get_logger()

# Security
_bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for dependency injection
Store = Annotated[InMemoryStore, Depends(get_store)]


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer_scheme)],
) -> TokenPayload:
    """Get the authenticated principal from the bearer token.

    Authentication is stateless: the token claims are trusted once the
    signature and expiry check out.

    Raises:
        HTTPException 401: If no token was sent
        HTTPException 403: If the token is invalid or expired
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return decode_access_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("invalid_access_token", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid token",
        ) from e


# Type alias for authenticated user dependency
CurrentUser = Annotated[TokenPayload, Depends(get_current_user)]


# Service dependencies
def get_user_service(store: Store) -> UserService:
    """Get user service instance."""
    return UserService(store)


def get_workflow_service(store: Store) -> WorkflowService:
    """Get workflow service instance."""
    return WorkflowService(store)


def get_integration_service(store: Store) -> IntegrationService:
    """Get integration service instance."""
    return IntegrationService(store)


def get_template_service(
    store: Store,
    workflow_service: Annotated[WorkflowService, Depends(get_workflow_service)],
) -> TemplateService:
    """Get template service instance."""
    return TemplateService(store, workflow_service)


def get_execution_service(
    store: Store,
    workflow_service: Annotated[WorkflowService, Depends(get_workflow_service)],
) -> ExecutionService:
    """Get execution service instance."""
    return ExecutionService(
        store,
        workflow_service,
        completion_delay=settings.execution_completion_delay,
    )


# Type aliases for service dependencies
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
WorkflowServiceDep = Annotated[WorkflowService, Depends(get_workflow_service)]
IntegrationServiceDep = Annotated[IntegrationService, Depends(get_integration_service)]
TemplateServiceDep = Annotated[TemplateService, Depends(get_template_service)]
ExecutionServiceDep = Annotated[ExecutionService, Depends(get_execution_service)]
