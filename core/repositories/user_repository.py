# =============================================================================
# core/repositories/user_repository.py - User Storage Interface
# =============================================================================
# The storage contract the UserService depends on. The service only ever
# sees this interface, so a persistent backend can replace the in-memory
# one without touching business logic.
# =============================================================================

from abc import ABC, abstractmethod

from core.models.user import User


class UserRepository(ABC):
    """
    Storage interface for User records.

    None of these operations raise. A missing user is reported as None.
    """

    @abstractmethod
    def find_all(self) -> list[User]:
        """Return every stored user in insertion order."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> User | None:
        """Return the first user with a matching id, or None."""

    @abstractmethod
    def create(self, user: User) -> User:
        """Store the user and return it unchanged."""
