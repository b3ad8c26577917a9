# =============================================================================
# core/repositories/memory.py - In-Memory User Storage
# =============================================================================
# Keeps users in a plain list for the lifetime of the process.
# Nothing survives a restart and instances do not share state.
# =============================================================================

import logging

from core.models.user import User
from .user_repository import UserRepository

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """
    List-backed UserRepository.

    Lookups are a linear scan. Duplicate ids are accepted on create,
    and find_by_id returns the earliest match.
    """

    def __init__(self, users: list[User] | None = None):
        self._users: list[User] = list(users or [])

    def find_all(self) -> list[User]:
        # Copy so callers can't mutate the store
        return list(self._users)

    def find_by_id(self, user_id: int) -> User | None:
        for user in self._users:
            if user.id == user_id:
                return user
        logger.debug(f"No user with id {user_id}")
        return None

    def create(self, user: User) -> User:
        self._users.append(user)
        return user
