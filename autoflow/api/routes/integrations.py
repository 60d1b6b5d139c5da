"""Integration API endpoints."""

from fastapi import APIRouter, HTTPException, status

from autoflow.api.deps import CurrentUser, IntegrationServiceDep
from autoflow.models.integration import Integration, IntegrationCreate
from autoflow.services.integration_service import IntegrationNotFoundError

router = APIRouter()


@router.get("", response_model=list[Integration])
async def list_integrations(
    user: CurrentUser,
    service: IntegrationServiceDep,
) -> list[Integration]:
    """List the built-in integrations and the user's own."""
    return service.list_all(user_id=user.sub)


@router.post("", response_model=Integration, status_code=status.HTTP_201_CREATED)
async def create_integration(
    user: CurrentUser,
    service: IntegrationServiceDep,
    data: IntegrationCreate,
) -> Integration:
    """Register a custom integration."""
    return service.create(user_id=user.sub, data=data)


@router.get("/{integration_id}", response_model=Integration)
async def get_integration(
    integration_id: str,
    user: CurrentUser,
    service: IntegrationServiceDep,
) -> Integration:
    try:
        return service.get(integration_id=integration_id, user_id=user.sub)
    except IntegrationNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
