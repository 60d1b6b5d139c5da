"""Integration entity model.

Integrations are catalog entries describing third-party services. The
built-in catalog has no owner; user-created entries are scoped by user_id.
"""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    """Get current UTC time with timezone info."""
    return datetime.now(timezone.utc)


class IntegrationBase(SQLModel):
    """Base integration fields shared across models."""

    name: str = Field(min_length=1, max_length=255)
    type: str = Field(
        min_length=1,
        max_length=100,
        description="Provider type (e.g. 'github', 'slack')",
    )
    description: str | None = Field(default=None, max_length=2000)
    config: dict[str, Any] | None = Field(
        default=None,
        description="Opaque provider configuration",
    )


class Integration(IntegrationBase):
    """Stored integration record."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    user_id: str | None = Field(
        default=None,
        description="Owner user ID, None for built-in integrations",
    )
    status: str = Field(default="active")
    created_at: datetime = Field(default_factory=utc_now)


class IntegrationCreate(IntegrationBase):
    """Schema for creating a new integration."""

    pass
