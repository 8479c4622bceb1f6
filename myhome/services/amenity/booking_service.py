# myhome/services/amenity/booking_service.py
from __future__ import annotations

import logging
from typing import Callable

from sqlalchemy.orm import Session

from myhome.repositories import AmenityBookingItemRepository
from myhome.services.common import UnitOfWork

logger = logging.getLogger(__name__)


class BookingService:
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def delete_booking(self, amenity_id: str, booking_id: str) -> bool:
        """Delete the booking only when it belongs to ``amenity_id``."""
        with UnitOfWork(self._session_factory) as uow:
            booking_repo = uow.get_repo(AmenityBookingItemRepository)
            booking = booking_repo.find_by_booking_id(booking_id)
            if booking is None:
                return False
            if booking.amenity is None or booking.amenity.amenity_id != amenity_id:
                return False

            booking.amenity.booking_items.discard(booking)
            booking_repo.delete(booking)
            logger.info(f"Booking {booking_id} of amenity {amenity_id} deleted")
            return True
