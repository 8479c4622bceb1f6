from myhome.repositories.base import BaseRepository
from myhome.repositories.user_repository import UserRepository
from myhome.repositories.security_token_repository import SecurityTokenRepository
from myhome.repositories.community_repository import CommunityHouseRepository, CommunityRepository
from myhome.repositories.house_member_repository import HouseMemberRepository
from myhome.repositories.amenity_repository import AmenityBookingItemRepository, AmenityRepository
from myhome.repositories.payment_repository import PaymentRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "SecurityTokenRepository",
    "CommunityRepository",
    "CommunityHouseRepository",
    "HouseMemberRepository",
    "AmenityRepository",
    "AmenityBookingItemRepository",
    "PaymentRepository",
]
