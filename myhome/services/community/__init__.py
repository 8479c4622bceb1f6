from myhome.services.community.community_service import CommunityService
from myhome.services.community.house_service import HouseService

__all__ = ["CommunityService", "HouseService"]
