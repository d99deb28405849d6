import pytest
from fastapi.testclient import TestClient

from garage_api.app.core.config import Settings
from garage_api.app.main import create_app


@pytest.fixture
def settings():
    """Settings for an isolated in-memory app"""
    return Settings(storage_backend="memory", api_prefix="", log_level="WARNING")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """HTTP client bound to a fresh app with empty stores"""
    return TestClient(app)


@pytest.fixture
def customer_payload():
    return {"name": "Jane Doe", "contact": "1234567890", "email": "jane@example.com"}
