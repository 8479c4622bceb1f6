"""Tests for amenities and amenity bookings."""

import uuid
from datetime import datetime, timedelta
from decimal import Decimal

from sqlalchemy import func, select

from myhome.models import AmenityBookingItem
from myhome.repositories import AmenityRepository
from myhome.schemas.amenity import AmenityCreate, AmenityUpdate
from myhome.schemas.community import CommunityCreate
from myhome.services.common import UnitOfWork


def _community_id(community_service, name: str = "Green Hills") -> str:
    return community_service.create_community(
        CommunityCreate(name=name, district="North"), "nobody"
    ).community_id


def _pool() -> AmenityCreate:
    return AmenityCreate(name="Pool", description="Outdoor pool", price=Decimal("12.50"))


def _book(session_factory, amenity_id: str) -> str:
    booking_id = str(uuid.uuid4())
    with UnitOfWork(session_factory) as uow:
        amenity = uow.get_repo(AmenityRepository).find_by_amenity_id(amenity_id)
        start = datetime(2024, 5, 1, 10, 0)
        uow.session.add(
            AmenityBookingItem(
                amenity_booking_item_id=booking_id,
                booking_start_date=start,
                booking_end_date=start + timedelta(hours=2),
                amenity=amenity,
            )
        )
    return booking_id


def _count_bookings(session_factory) -> int:
    with UnitOfWork(session_factory) as uow:
        return uow.session.execute(select(func.count(AmenityBookingItem.id))).scalar_one()


class TestAmenities:
    def test_create_and_list(self, community_service, amenity_service):
        community_id = _community_id(community_service)

        created = amenity_service.create_amenities(
            [_pool(), AmenityCreate(name="Gym", description="", price=Decimal("0"))], community_id
        )

        assert [a.name for a in created] == ["Pool", "Gym"]
        assert [a.amenity_id for a in amenity_service.list_all_amenities(community_id)] == [
            a.amenity_id for a in created
        ]
        details = amenity_service.get_amenity_details(created[0].amenity_id)
        assert details.price == Decimal("12.50")

    def test_create_in_missing_community(self, amenity_service):
        assert amenity_service.create_amenities([_pool()], "missing") is None

    def test_list_missing_community(self, amenity_service):
        assert amenity_service.list_all_amenities("missing") == []
        assert amenity_service.get_amenity_details("missing") is None

    def test_delete(self, community_service, amenity_service):
        community_id = _community_id(community_service)
        (pool,) = amenity_service.create_amenities([_pool()], community_id)

        assert amenity_service.delete_amenity(pool.amenity_id) is True
        assert amenity_service.get_amenity_details(pool.amenity_id) is None
        assert amenity_service.list_all_amenities(community_id) == []
        assert amenity_service.delete_amenity(pool.amenity_id) is False

    def test_delete_removes_bookings(self, community_service, amenity_service, session_factory):
        community_id = _community_id(community_service)
        (pool,) = amenity_service.create_amenities([_pool()], community_id)
        _book(session_factory, pool.amenity_id)

        assert amenity_service.delete_amenity(pool.amenity_id) is True
        assert _count_bookings(session_factory) == 0

    def test_update_in_place(self, community_service, amenity_service):
        community_id = _community_id(community_service)
        (pool,) = amenity_service.create_amenities([_pool()], community_id)

        updated = amenity_service.update_amenity(
            AmenityUpdate(
                amenity_id=pool.amenity_id,
                name="Indoor pool",
                description="Heated",
                price=Decimal("20.00"),
                community_id=community_id,
            )
        )

        assert updated is True
        details = amenity_service.get_amenity_details(pool.amenity_id)
        assert details.name == "Indoor pool"
        assert details.description == "Heated"
        assert details.price == Decimal("20.00")
        assert len(amenity_service.list_all_amenities(community_id)) == 1

    def test_update_moves_to_other_community(self, community_service, amenity_service):
        source = _community_id(community_service)
        target = _community_id(community_service, name="Blue Lake")
        (pool,) = amenity_service.create_amenities([_pool()], source)

        assert amenity_service.update_amenity(
            AmenityUpdate(
                amenity_id=pool.amenity_id,
                name="Pool",
                description="Outdoor pool",
                price=Decimal("12.50"),
                community_id=target,
            )
        ) is True

        assert amenity_service.list_all_amenities(source) == []
        assert [a.amenity_id for a in amenity_service.list_all_amenities(target)] == [pool.amenity_id]

    def test_update_with_missing_references(self, community_service, amenity_service):
        community_id = _community_id(community_service)
        (pool,) = amenity_service.create_amenities([_pool()], community_id)

        def update(amenity_id, target):
            return amenity_service.update_amenity(
                AmenityUpdate(
                    amenity_id=amenity_id,
                    name="Renamed",
                    description="",
                    price=Decimal("1"),
                    community_id=target,
                )
            )

        assert update("missing", community_id) is False
        assert update(pool.amenity_id, "missing") is False
        assert amenity_service.get_amenity_details(pool.amenity_id).name == "Pool"


class TestBookings:
    def test_delete_booking(self, community_service, amenity_service, booking_service, session_factory):
        community_id = _community_id(community_service)
        (pool,) = amenity_service.create_amenities([_pool()], community_id)
        booking_id = _book(session_factory, pool.amenity_id)

        assert booking_service.delete_booking(pool.amenity_id, booking_id) is True
        assert _count_bookings(session_factory) == 0
        assert booking_service.delete_booking(pool.amenity_id, booking_id) is False

    def test_booking_of_other_amenity_is_kept(
        self, community_service, amenity_service, booking_service, session_factory
    ):
        community_id = _community_id(community_service)
        pool, gym = amenity_service.create_amenities(
            [_pool(), AmenityCreate(name="Gym", description="", price=Decimal("5"))], community_id
        )
        booking_id = _book(session_factory, pool.amenity_id)

        assert booking_service.delete_booking(gym.amenity_id, booking_id) is False
        assert _count_bookings(session_factory) == 1
