from myhome.schemas.amenity import AmenityCreate, AmenityRecord, AmenityUpdate
from myhome.schemas.auth import AuthenticationData, LoginRequest
from myhome.schemas.community import (
    CommunityCreate,
    CommunityDetails,
    CommunityRecord,
    HouseCreate,
    HouseMemberCreate,
    HouseMemberRecord,
    HouseRecord,
)
from myhome.schemas.document import HouseMemberDocumentRecord
from myhome.schemas.payment import PaymentCreate, PaymentRecord
from myhome.schemas.user import UserCreate, UserRecord

__all__ = [
    "AmenityCreate",
    "AmenityRecord",
    "AmenityUpdate",
    "AuthenticationData",
    "LoginRequest",
    "CommunityCreate",
    "CommunityDetails",
    "CommunityRecord",
    "HouseCreate",
    "HouseMemberCreate",
    "HouseMemberRecord",
    "HouseRecord",
    "HouseMemberDocumentRecord",
    "PaymentCreate",
    "PaymentRecord",
    "UserCreate",
    "UserRecord",
]
