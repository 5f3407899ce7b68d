"""API request/response schemas for the task API."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator, model_validator


# Task-related schemas
class TaskPayload(BaseModel):
    """Body accepted by create and update.

    Keys are matched to the wire names case-insensitively and unknown keys
    are ignored. ``id`` and ``created_at`` must be well typed when present,
    but their values are never used. ``null`` is read as an empty string.
    """
    id: Optional[StrictInt] = Field(default=None, ge=-(2 ** 63), le=2 ** 63 - 1, description="Ignored; assigned by the store")
    title: StrictStr = Field(default="", alias="titulo", description="Task title")
    description: StrictStr = Field(default="", alias="descripcion", description="Task description")
    status: StrictStr = Field(default="", alias="estado", description="Task status")
    priority: StrictStr = Field(default="", alias="prioridad", description="Task priority")
    created_at: Optional[datetime] = Field(default=None, strict=True, description="Ignored; kept from creation")

    class Config:
        """Pydantic configuration."""
        extra = "ignore"

    @model_validator(mode="before")
    @classmethod
    def fold_key_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return {_WIRE_NAMES.get(key.lower(), key): value for key, value in data.items()}

    @field_validator("title", "description", "status", "priority", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


_WIRE_NAMES = {
    (field.alias or name).lower(): field.alias or name
    for name, field in TaskPayload.model_fields.items()
}


# Health check schema
class HealthResponse(BaseModel):
    """Schema for health check responses."""
    status: str = Field(default="ok", description="Service health status")
    service: str = Field(..., description="Service name")


class ErrorResponse(BaseModel):
    """Schema for error responses."""
    error: str = Field(..., description="Human readable error message")
