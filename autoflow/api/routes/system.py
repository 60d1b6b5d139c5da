"""System API endpoints.

Usage statistics and the JSON endpoint catalogue.
"""

import resource
import time
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Request

from autoflow import __version__
from autoflow.api.deps import (
    CurrentUser,
    ExecutionServiceDep,
    IntegrationServiceDep,
    TemplateServiceDep,
    WorkflowServiceDep,
)

router = APIRouter()

_process_started = time.monotonic()


def uptime_seconds() -> float:
    """Seconds since the application module was loaded."""
    return round(time.monotonic() - _process_started, 3)


def memory_usage() -> dict[str, int]:
    usage = resource.getrusage(resource.RUSAGE_SELF)
    return {
        "max_rss_kb": usage.ru_maxrss,
        "minor_page_faults": usage.ru_minflt,
        "major_page_faults": usage.ru_majflt,
    }


ENDPOINTS: dict[str, dict[str, str]] = {
    "authentication": {
        "register": "POST /api/auth/register",
        "login": "POST /api/auth/login",
        "me": "GET /api/auth/me",
    },
    "workflows": {
        "list": "GET /api/workflows",
        "create": "POST /api/workflows",
        "get": "GET /api/workflows/:workflowId",
        "update": "PUT /api/workflows/:workflowId",
        "delete": "DELETE /api/workflows/:workflowId",
        "execute": "POST /api/executions/:workflowId",
    },
    "integrations": {
        "list": "GET /api/integrations",
        "create": "POST /api/integrations",
        "get": "GET /api/integrations/:integrationId",
    },
    "templates": {
        "list": "GET /api/templates",
        "get": "GET /api/templates/:templateId",
        "deploy": "POST /api/templates/:templateId/deploy",
    },
    "executions": {
        "list": "GET /api/executions",
        "get": "GET /api/executions/:executionId",
    },
    "system": {
        "health": "GET /health",
        "stats": "GET /api/system/stats",
    },
}


@router.get("/system/stats", tags=["system"])
async def system_stats(
    user: CurrentUser,
    workflow_service: WorkflowServiceDep,
    execution_service: ExecutionServiceDep,
    integration_service: IntegrationServiceDep,
    template_service: TemplateServiceDep,
) -> dict[str, Any]:
    """Usage counters for the current user plus process information."""
    return {
        "total_workflows": workflow_service.count(user.sub),
        "total_executions": execution_service.count(user.sub),
        "total_integrations": integration_service.count(user.sub),
        "total_templates": template_service.count(),
        "system_status": "operational",
        "uptime": uptime_seconds(),
        "memory": memory_usage(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/docs", tags=["system"])
async def api_docs(request: Request) -> dict[str, Any]:
    """Machine-readable list of the public endpoints."""
    return {
        "title": "AutoFlow API Documentation",
        "version": __version__,
        "base_url": str(request.base_url).rstrip("/"),
        "endpoints": ENDPOINTS,
    }
