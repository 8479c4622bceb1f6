"""
Base schema classes with common configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

__all__ = ["BaseSchema", "BaseCreateSchema"]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    Records returned by services are built from ORM entities inside the
    unit of work, so callers never touch detached instances.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=False,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class BaseCreateSchema(BaseSchema):
    """Input payloads: unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")
