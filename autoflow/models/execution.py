"""Execution entity model.

An execution is a simulated run of a workflow. It starts in RUNNING and is
moved to COMPLETED by a timer; no real work is performed.
"""

from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    """Get current UTC time with timezone info."""
    return datetime.now(timezone.utc)


class ExecutionStatus(str, Enum):
    """Execution lifecycle status."""

    RUNNING = "running"
    COMPLETED = "completed"


class Execution(SQLModel):
    """Stored execution record.

    Tracks status transitions, log lines and timing.
    """

    id: str = Field(
        default_factory=lambda: str(uuid4()),
        description="Unique execution identifier (UUID)",
    )
    workflow_id: str = Field(description="Associated workflow ID")
    user_id: str = Field(description="User who triggered the execution")
    status: ExecutionStatus = Field(
        default=ExecutionStatus.RUNNING,
        description="Current execution status",
    )
    logs: list[str] = Field(default_factory=list)
    started_at: datetime = Field(
        default_factory=utc_now,
        description="Execution start timestamp (UTC)",
    )
    completed_at: datetime | None = Field(
        default=None,
        description="Execution completion timestamp (UTC)",
    )

    @property
    def duration_ms(self) -> int | None:
        """Calculate execution duration in milliseconds."""
        if self.completed_at is None:
            return None
        delta = self.completed_at - self.started_at
        return int(delta.total_seconds() * 1000)

    def mark_completed(self, processed_items: int) -> None:
        """Mark execution as completed and append the summary log lines."""
        self.status = ExecutionStatus.COMPLETED
        self.completed_at = utc_now()
        self.logs.append("Execution completed successfully")
        self.logs.append(f"Processed {processed_items} items")
