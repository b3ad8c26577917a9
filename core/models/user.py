# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - User: The stored record returned to clients
# - UserCreate: Input for creating a new user
#
# A user is created once and never changed. There is no update or delete.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    A single user record.

    The id is the creation time in milliseconds since epoch. It is not
    guaranteed unique: two users created in the same millisecond share it.

    Example:
        {
            "id": 1705314600000,
            "name": "Alice",
            "email": "alice@example.com"
        }
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ...,
        description="Creation timestamp in milliseconds, used as identifier"
    )

    # name and email are stored as given, missing values stay None
    name: str | None = Field(
        default=None,
        description="Display name"
    )

    email: str | None = Field(
        default=None,
        description="Email address (not validated)"
    )


class UserCreate(BaseModel):
    """
    Schema for creating a new user.

    Both fields are optional. A payload without them still creates a user
    whose name/email are null.
    """

    name: str | None = Field(
        default=None,
        examples=["Alice"],
        description="Display name"
    )

    email: str | None = Field(
        default=None,
        examples=["alice@example.com"],
        description="Email address"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"name": "Alice", "email": "alice@example.com"},
            ]
        }
    }
