# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# Composition root and FastAPI dependency injection.
# Services are built once at startup and stored on app.state;
# route handlers receive them through Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from app.exceptions import ServiceNotReadyError
from core.repositories import InMemoryUserRepository, UserRepository
from core.services.config_service import ConfigService
from core.services.user_service import UserService


def build_user_service(repository: UserRepository | None = None) -> UserService:
    """
    Construct the UserService.

    Uses a fresh in-memory repository unless one is supplied.
    """
    if repository is None:
        repository = InMemoryUserRepository()
    return UserService(repository)


def build_config_service(settings: Settings) -> ConfigService:
    return ConfigService(settings.app_config)


def peek_user_service(request: Request) -> UserService | None:
    """Return the wired UserService, or None before startup has run."""
    return getattr(request.app.state, "user_service", None)


def get_user_service(request: Request) -> UserService:
    service = peek_user_service(request)
    if service is None:
        raise ServiceNotReadyError("user_service")
    return service


def get_config_service(request: Request) -> ConfigService:
    service = getattr(request.app.state, "config_service", None)
    if service is None:
        raise ServiceNotReadyError("config_service")
    return service


# Type aliases for dependency injection
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
ConfigServiceDep = Annotated[ConfigService, Depends(get_config_service)]
