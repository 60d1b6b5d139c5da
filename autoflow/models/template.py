"""Workflow template model.

Templates are static catalog entries that can be deployed into a new workflow.
"""

from sqlmodel import Field, SQLModel


class Template(SQLModel):
    """Catalog entry clonable into a workflow."""

    id: str
    name: str
    description: str
    category: str
    triggers: list[str] = Field(default_factory=list)
    actions: list[str] = Field(default_factory=list)
    price: int = Field(default=0, ge=0, description="Price in USD")
