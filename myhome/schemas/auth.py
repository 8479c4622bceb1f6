"""
Login schemas.
"""

from __future__ import annotations

from pydantic import EmailStr, Field

from myhome.schemas.base import BaseCreateSchema, BaseSchema

__all__ = ["LoginRequest", "AuthenticationData"]


class LoginRequest(BaseCreateSchema):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class AuthenticationData(BaseSchema):
    """Signed session token together with the id of the user it was issued to."""

    jwt_token: str
    user_id: str
