"""
Amenity schemas.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from myhome.schemas.base import BaseCreateSchema, BaseSchema

__all__ = ["AmenityCreate", "AmenityUpdate", "AmenityRecord"]


class AmenityCreate(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., max_length=2000)
    price: Decimal = Field(..., ge=0)


class AmenityUpdate(BaseCreateSchema):
    """
    Replacement values for an existing amenity.

    ``community_id`` names the community the amenity belongs to after the
    update, which may differ from its current one.
    """

    amenity_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., max_length=2000)
    price: Decimal = Field(..., ge=0)
    community_id: str = Field(..., min_length=1)


class AmenityRecord(BaseSchema):
    amenity_id: str
    name: str
    description: str
    price: Decimal
