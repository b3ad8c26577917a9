# =============================================================================
# app/routers/users.py - User Endpoints
# =============================================================================
# Maps HTTP requests onto UserService with no extra logic.
# A missing user is returned as null, not as a 404.
# =============================================================================

import logging
import re
from typing import Annotated

from fastapi import APIRouter, Path, status

from app.dependencies import UserServiceDep
from core.models.user import User, UserCreate

logger = logging.getLogger(__name__)

router = APIRouter()

# Optionally signed decimal digits only
USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_user_id(raw: str) -> int | None:
    """
    Parse a path segment as a user id.

    Returns None unless the segment is plain decimal digits with an optional
    sign. Anything else can never match a stored user. Forms int() would
    otherwise accept, like "1_000" or padded whitespace, are rejected.
    """
    if not USER_ID_PATTERN.fullmatch(raw):
        return None
    return int(raw)


# =============================================================================
# Endpoints
# =============================================================================

# Registered before /{user_id} so "all" is never read as an id
@router.get("/all", response_model=list[User])
async def get_all_users(service: UserServiceDep):
    """
    List all users.

    Returns users in the order they were created.
    """
    return service.get_all_users()


@router.get("/{user_id}", response_model=User | None)
async def get_user(
    user_id: Annotated[str, Path(description="User id (millisecond timestamp)")],
    service: UserServiceDep,
):
    """
    Get a user by id.

    Returns null when no user has this id.
    """
    parsed = parse_user_id(user_id)
    if parsed is None:
        logger.debug(f"Non-numeric user id: {user_id!r}")
        return None
    return service.get_user_by_id(parsed)


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    service: UserServiceDep,
    request: UserCreate | None = None,
):
    """
    Create a new user.

    name and email are stored as given; missing fields become null.
    """
    request = request or UserCreate()
    return service.create_user(request.name, request.email)
