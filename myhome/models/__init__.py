"""
ORM models for the community backend.

Importing this package registers every table with ``Base.metadata``.
"""

from myhome.models.base import BaseEntity
from myhome.models.user import User
from myhome.models.security_token import SecurityToken, SecurityTokenType
from myhome.models.community import Community, CommunityHouse, community_admins
from myhome.models.house_member import HouseMember, HouseMemberDocument
from myhome.models.amenity import Amenity, AmenityBookingItem
from myhome.models.payment import Payment

__all__ = [
    "BaseEntity",
    "User",
    "SecurityToken",
    "SecurityTokenType",
    "Community",
    "CommunityHouse",
    "community_admins",
    "HouseMember",
    "HouseMemberDocument",
    "Amenity",
    "AmenityBookingItem",
    "Payment",
]
