"""Dependency injection helpers for FastAPI."""

from functools import lru_cache

from fastapi import Request

from .config import Settings, settings
from .services.task_service import TaskStore


@lru_cache()
def get_settings() -> Settings:
    """Get application settings (cached)."""
    return settings


def get_task_store(request: Request) -> TaskStore:
    """Get the task store owned by the running application."""
    return request.app.state.task_store
