"""Shared test fixtures and configuration for the test suite."""

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Add the parent directory to the path for imports
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from tareas_api.config import Settings
from tareas_api.main import create_app
from tareas_api.schemas import TaskPayload
from tareas_api.services.task_service import TaskStore


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings without file logging."""
    return Settings(
        service_name="api-tareas",
        log_level="DEBUG",
        environment="test",
        log_file=None,
    )


@pytest.fixture
def task_store() -> TaskStore:
    """Create an empty task store for testing."""
    return TaskStore()


@pytest.fixture
def app(test_settings) -> FastAPI:
    """Create a fresh application, with its own empty store."""
    return create_app(test_settings)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store(app) -> TaskStore:
    """The store owned by the ``app`` fixture."""
    return app.state.task_store


# Test data fixtures
@pytest.fixture
def sample_task_data():
    """Sample task data for testing."""
    return {
        "titulo": "Test Task",
        "descripcion": "This is a test task description",
        "estado": "in_progress",
        "prioridad": "high",
    }


@pytest.fixture
def sample_payload(sample_task_data) -> TaskPayload:
    """Sample decoded payload for testing."""
    return TaskPayload.model_validate(sample_task_data)
