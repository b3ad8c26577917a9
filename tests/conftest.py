# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides repository, service and HTTP client fixtures
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("API_KEY", "test-api-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from core.repositories import InMemoryUserRepository
from core.services.user_service import UserService


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_705_314_600_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1) -> None:
        self.now += ms


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def clock():
    """Frozen clock starting at 2024-01-15T10:30:00Z."""
    return FakeClock()


@pytest.fixture
def repository():
    """Empty in-memory repository."""
    return InMemoryUserRepository()


@pytest.fixture
def user_service(repository, clock):
    """UserService over an empty repository with a controllable clock."""
    return UserService(repository, clock=clock)


@pytest.fixture
def client(repository):
    """TestClient with lifespan run, backed by the repository fixture."""
    with TestClient(create_app(user_repository=repository)) as test_client:
        yield test_client
