"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from user_registry_api.app.core.config import Settings
from user_registry_api.app.main import create_app
from user_registry_api.app.services.photo_store import PhotoStore
from user_registry_api.app.services.user_registry import UserRegistry


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment the tests run in."""
    return Settings(
        api_prefix="",
        page_size=3,
        legacy_total_pages=False,
        seed_users=True,
        gzip_minimum_size=1000,
        debug=False,
    )


@pytest.fixture
def registry() -> UserRegistry:
    """A registry holding the seven seed users."""
    registry = UserRegistry(page_size=3)
    registry.seed()
    return registry


@pytest.fixture
def photo_store() -> PhotoStore:
    return PhotoStore()


@pytest.fixture
def app(settings, registry, photo_store):
    return create_app(settings, registry=registry, photo_store=photo_store)


@pytest.fixture
def client(app) -> TestClient:
    """Create a test client bound to a fresh application."""
    return TestClient(app)
