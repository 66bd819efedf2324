"""
API test fixtures.

Provides: TestClient with service dependencies overridden
Dependencies: fastapi.testclient
System role: HTTP layer test infrastructure
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from backend.api.deps import get_diagram_service, get_study_service
from backend.api.main import app
from backend.application.services.diagram_service import DiagramService


@pytest.fixture
def mock_study_service() -> AsyncMock:
    """Provide a mocked StudyService."""
    return AsyncMock()


@pytest.fixture
def client(mock_study_service, static_backend):
    """Provide a TestClient with the study service mocked and a static renderer."""
    app.dependency_overrides[get_study_service] = lambda: mock_study_service
    app.dependency_overrides[get_diagram_service] = lambda: DiagramService(static_backend)
    yield TestClient(app)
    app.dependency_overrides.clear()
