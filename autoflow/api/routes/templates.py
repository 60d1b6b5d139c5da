"""Template API endpoints.

Lists the template catalog and deploys templates into workflows.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from autoflow.api.deps import CurrentUser, TemplateServiceDep
from autoflow.models.template import Template
from autoflow.models.workflow import TemplateDeployment
from autoflow.services.template_service import TemplateNotFoundError

router = APIRouter()


@router.get("", response_model=list[Template])
async def list_templates(
    user: CurrentUser,
    service: TemplateServiceDep,
    category: Annotated[str | None, Query(max_length=100)] = None,
) -> list[Template]:
    """List templates.

    Args:
        user: Current authenticated user
        service: Template service
        category: Only return templates in this category

    Returns:
        List of templates
    """
    return service.list_all(category=category)


@router.get("/{template_id}", response_model=Template)
async def get_template(
    template_id: str,
    user: CurrentUser,
    service: TemplateServiceDep,
) -> Template:
    try:
        return service.get(template_id)
    except TemplateNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e


@router.post(
    "/{template_id}/deploy",
    response_model=TemplateDeployment,
    status_code=status.HTTP_201_CREATED,
)
async def deploy_template(
    template_id: str,
    user: CurrentUser,
    service: TemplateServiceDep,
) -> TemplateDeployment:
    """Deploy a template as a new active workflow owned by the user.

    Args:
        template_id: Template identifier
        user: Current authenticated user
        service: Template service

    Returns:
        The created workflow
    """
    try:
        workflow = service.deploy(template_id=template_id, user_id=user.sub)
    except TemplateNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e

    return TemplateDeployment(
        message="Template deployed successfully",
        workflow=workflow,
    )
