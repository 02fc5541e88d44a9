"""Pytest configuration for endpoint tests."""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from api.common import get_biztime_db


@pytest.fixture
def mock_db() -> Mock:
    """Stand-in for BizTimeDatabase."""
    return Mock()


@pytest.fixture
def client(mock_db: Mock) -> TestClient:
    """Create a test client whose routes see the mocked database."""
    from app import app

    app.dependency_overrides[get_biztime_db] = lambda: mock_db
    yield TestClient(app)
    app.dependency_overrides.clear()
