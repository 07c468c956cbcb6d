"""Fixtures for end-to-end tests against the FastAPI app."""

import pytest
from fastapi.testclient import TestClient

from qna.interface.api.app import create_app
from tests.di import make_test_settings


@pytest.fixture
def settings():
    return make_test_settings()


@pytest.fixture
def client(settings):
    """Test client over a fresh app with in-memory stores."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client
