# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# - user.py: User record and creation schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .user import User, UserCreate

__all__ = [
    "User",
    "UserCreate",
]
