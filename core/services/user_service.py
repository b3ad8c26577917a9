# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Handles user creation and lookup on top of a UserRepository.
# Separates HTTP concerns from storage.
# =============================================================================

import logging
import time
from typing import Callable

from core.models.user import User
from core.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def current_time_millis() -> int:
    """Wall-clock time in milliseconds since epoch."""
    return time.time_ns() // 1_000_000


class UserService:
    """
    Service for user management operations.

    Holds no state of its own beyond the repository it delegates to.
    """

    def __init__(
        self,
        repository: UserRepository,
        clock: Callable[[], int] | None = None,
    ):
        self.repository = repository
        self._clock = clock or current_time_millis

    def get_all_users(self) -> list[User]:
        """
        Get every user.

        Returns:
            Users in the order they were created (empty list if none)
        """
        return self.repository.find_all()

    def get_user_by_id(self, user_id: int) -> User | None:
        """
        Get a user by ID.

        Args:
            user_id: The user's millisecond-timestamp id

        Returns:
            The first stored user with that id, or None if there is none
        """
        return self.repository.find_by_id(user_id)

    def create_user(self, name: str | None, email: str | None) -> User:
        """
        Create a new user.

        The id is the current time in milliseconds. Two users created within
        the same millisecond get the same id; the repository accepts both.

        Args:
            name: Display name, stored as given
            email: Email address, stored as given

        Returns:
            The stored user
        """
        user = User(id=self._clock(), name=name, email=email)
        created = self.repository.create(user)
        logger.info(f"Created user: {created.id}")
        return created
