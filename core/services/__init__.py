# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_service import UserService
from .config_service import AppConfig, ConfigService

__all__ = [
    "UserService",
    "AppConfig",
    "ConfigService",
]
