# =============================================================================
# core/repositories/__init__.py - Repository Exports
# =============================================================================

from .user_repository import UserRepository
from .memory import InMemoryUserRepository

__all__ = [
    "UserRepository",
    "InMemoryUserRepository",
]
