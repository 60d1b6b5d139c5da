"""Workflow entity model.

A workflow pairs a trigger string with an ordered list of action strings.
Both are opaque: they are stored and echoed back, never interpreted.
"""

from datetime import datetime, timezone
from uuid import uuid4

from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    """Get current UTC time with timezone info."""
    return datetime.now(timezone.utc)


DEFAULT_WORKFLOW_STATUS = "active"


class WorkflowBase(SQLModel):
    """Base workflow fields shared across models."""

    name: str = Field(
        max_length=255,
        min_length=1,
        description="Workflow name",
    )
    description: str | None = Field(
        default=None,
        max_length=2000,
        description="Workflow description",
    )
    trigger: str | None = Field(
        default=None,
        max_length=255,
        description="Opaque trigger identifier (e.g. 'webhook', 'schedule')",
    )
    actions: list[str] = Field(
        default_factory=list,
        description="Ordered list of opaque action identifiers",
    )


class Workflow(WorkflowBase):
    """Stored workflow record, owned by the user that created it."""

    id: str = Field(
        default_factory=lambda: str(uuid4()),
        description="Unique workflow identifier (UUID)",
    )
    user_id: str = Field(description="Owner user ID")
    status: str = Field(
        default=DEFAULT_WORKFLOW_STATUS,
        description="Free-form lifecycle status",
    )
    template_id: str | None = Field(
        default=None,
        description="Template this workflow was deployed from, if any",
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        description="Creation timestamp (UTC)",
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        description="Last update timestamp (UTC)",
    )


class WorkflowCreate(WorkflowBase):
    """Schema for creating a new workflow."""

    actions: list[str] | None = None


class WorkflowUpdate(SQLModel):
    """Schema for updating a workflow."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=2000)
    trigger: str | None = Field(default=None, max_length=255)
    actions: list[str] | None = None
    status: str | None = Field(default=None, min_length=1, max_length=50)


class TemplateDeployment(SQLModel):
    """Response returned when a template is deployed."""

    message: str
    workflow: Workflow
