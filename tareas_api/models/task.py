"""Domain models for the task API."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


class TaskStatus(str, Enum):
    """Task status enumeration."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    """Task priority enumeration."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Task(BaseModel):
    """Task domain model.

    Status and priority are kept as plain strings: the enumerations above
    only supply the defaults applied on creation.
    """

    id: int = Field(..., description="Unique task identifier")
    title: str = Field(..., min_length=1, alias="titulo", description="Task title")
    description: str = Field(default="", alias="descripcion", description="Task description")
    status: str = Field(default=TaskStatus.PENDING.value, alias="estado", description="Task status")
    priority: str = Field(default=TaskPriority.MEDIUM.value, alias="prioridad", description="Task priority")
    created_at: datetime = Field(default_factory=utc_now, description="Task creation timestamp")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True

    def to_wire(self) -> dict:
        """Serialize using the JSON field names of the HTTP API."""
        return self.model_dump(mode="json", by_alias=True)
