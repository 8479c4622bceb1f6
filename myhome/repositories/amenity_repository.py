# myhome/repositories/amenity_repository.py
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from myhome.models import Amenity, AmenityBookingItem, Community
from myhome.repositories.base import BaseRepository


class AmenityRepository(BaseRepository[Amenity]):
    def __init__(self, session: Session):
        super().__init__(session, Amenity)

    def find_by_amenity_id(self, amenity_id: str) -> Optional[Amenity]:
        stmt = self._base_select().where(Amenity.amenity_id == amenity_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def find_by_amenity_id_with_community(self, amenity_id: str) -> Optional[Amenity]:
        stmt = (
            self._base_select()
            .options(selectinload(Amenity.community))
            .where(Amenity.amenity_id == amenity_id)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def find_all_by_community_id(self, community_id: str) -> List[Amenity]:
        stmt = (
            self._base_select()
            .join(Amenity.community)
            .where(Community.community_id == community_id)
            .order_by(Amenity.id)
        )
        return list(self.session.execute(stmt).scalars().all())


class AmenityBookingItemRepository(BaseRepository[AmenityBookingItem]):
    def __init__(self, session: Session):
        super().__init__(session, AmenityBookingItem)

    def find_by_booking_id(self, booking_id: str) -> Optional[AmenityBookingItem]:
        stmt = (
            self._base_select()
            .options(selectinload(AmenityBookingItem.amenity))
            .where(AmenityBookingItem.amenity_booking_item_id == booking_id)
        )
        return self.session.execute(stmt).scalar_one_or_none()
