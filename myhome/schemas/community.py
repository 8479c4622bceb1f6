"""
Community, house and house member schemas.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from myhome.schemas.base import BaseCreateSchema, BaseSchema
from myhome.schemas.user import UserRecord

__all__ = [
    "CommunityCreate",
    "CommunityRecord",
    "CommunityDetails",
    "HouseCreate",
    "HouseRecord",
    "HouseMemberCreate",
    "HouseMemberRecord",
]


class CommunityCreate(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=255)
    district: str = Field(..., min_length=1, max_length=255)


class CommunityRecord(BaseSchema):
    community_id: str
    name: str
    district: str


class CommunityDetails(CommunityRecord):
    """Community together with its administrators."""

    admins: List[UserRecord] = Field(default_factory=list)


class HouseCreate(BaseCreateSchema):
    """
    New house. ``house_id`` is only used to recognise a house the community
    already holds; added houses always get a freshly generated id.
    """

    name: str = Field(..., min_length=1, max_length=255)
    house_id: Optional[str] = None


class HouseRecord(BaseSchema):
    house_id: str
    name: str


class HouseMemberCreate(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=255)


class HouseMemberRecord(BaseSchema):
    member_id: str
    name: str
