from myhome.services.amenity.amenity_service import AmenityService
from myhome.services.amenity.booking_service import BookingService

__all__ = ["AmenityService", "BookingService"]
