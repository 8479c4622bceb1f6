"""
User account schemas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Set

from pydantic import EmailStr, Field, field_validator

from myhome.schemas.base import BaseCreateSchema, BaseSchema

if TYPE_CHECKING:
    from myhome.models import User

__all__ = ["UserCreate", "UserRecord"]


class UserCreate(BaseCreateSchema):
    """Registration payload."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., examples=["user@mail.com"])
    password: str = Field(..., min_length=8, max_length=80)

    @field_validator("password", mode="after")
    @classmethod
    def validate_password_not_empty(cls, v: str) -> str:
        """Ensure password is not just whitespace."""
        if not v.strip():
            raise ValueError("Password cannot be empty or whitespace")
        return v


class UserRecord(BaseSchema):
    """User as exposed to callers. The password hash is never included."""

    user_id: str
    name: str
    email: str
    email_confirmed: bool = False
    community_ids: Set[str] = Field(default_factory=set)

    @classmethod
    def from_user(cls, user: "User", *, with_communities: bool = False) -> "UserRecord":
        community_ids = (
            {community.community_id for community in user.communities}
            if with_communities
            else set()
        )
        return cls(
            user_id=user.user_id,
            name=user.name,
            email=user.email,
            email_confirmed=user.email_confirmed,
            community_ids=community_ids,
        )
