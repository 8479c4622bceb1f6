"""Tests for communities, their admins and cascading house removal."""

from decimal import Decimal

from sqlalchemy import func, select

from myhome.models import Amenity, CommunityHouse, HouseMember
from myhome.repositories import HouseMemberRepository, UserRepository
from myhome.schemas.amenity import AmenityCreate
from myhome.schemas.community import CommunityCreate, HouseCreate, HouseMemberCreate
from myhome.services.common import UnitOfWork


def _community(community_service, creator_id: str = "nobody"):
    return community_service.create_community(
        CommunityCreate(name="Green Hills", district="North"), creator_id
    )


def _count(session_factory, model) -> int:
    with UnitOfWork(session_factory) as uow:
        return uow.session.execute(select(func.count(model.id))).scalar_one()


class TestCreateCommunity:
    def test_creator_becomes_only_admin(self, community_service, create_user):
        john = create_user()

        details = _community(community_service, john.user_id)

        assert details.community_id
        assert details.name == "Green Hills"
        assert [admin.user_id for admin in details.admins] == [john.user_id]

    def test_unknown_creator_leaves_no_admins(self, community_service):
        details = _community(community_service)

        assert details.admins == []
        assert community_service.get_community_details_by_id(details.community_id).name == "Green Hills"

    def test_creator_sees_community_in_user_details(self, community_service, user_service, create_user):
        john = create_user()
        details = _community(community_service, john.user_id)

        assert user_service.get_user_details(john.user_id).community_ids == {details.community_id}

    def test_list_and_missing(self, community_service):
        first = _community(community_service)
        second = _community(community_service)

        assert [c.community_id for c in community_service.list_all()] == [
            first.community_id,
            second.community_id,
        ]
        assert community_service.get_community_details_by_id("missing") is None
        assert community_service.get_community_details_by_id_with_admins("missing") is None


class TestAdmins:
    def test_add_admins_is_idempotent(self, community_service, create_user):
        john = create_user()
        ann = create_user(email="ann@mail.com", name="Ann")
        community = _community(community_service, john.user_id)

        details = community_service.add_admins_to_community(
            community.community_id, [ann.user_id, ann.user_id, john.user_id]
        )
        assert {a.user_id for a in details.admins} == {john.user_id, ann.user_id}

        again = community_service.add_admins_to_community(community.community_id, [ann.user_id])
        assert len(again.admins) == 2

    def test_add_admins_ignores_unknown_users(self, community_service, create_user):
        john = create_user()
        community = _community(community_service, john.user_id)

        details = community_service.add_admins_to_community(community.community_id, ["missing"])

        assert [a.user_id for a in details.admins] == [john.user_id]

    def test_add_admins_to_missing_community(self, community_service, create_user):
        john = create_user()

        assert community_service.add_admins_to_community("missing", [john.user_id]) is None

    def test_find_admins(self, community_service, create_user):
        john = create_user()
        community = _community(community_service, john.user_id)

        admins = community_service.find_community_admins_by_id(community.community_id)

        assert [a.user_id for a in admins] == [john.user_id]
        assert community_service.find_community_admins_by_id("missing") is None
        assert community_service.find_community_admin_by_id(john.user_id).email == "john@mail.com"
        assert community_service.find_community_admin_by_id("missing") is None

    def test_remove_admin_updates_both_sides(self, community_service, user_service, create_user):
        john = create_user()
        community = _community(community_service, john.user_id)

        assert community_service.remove_admin_from_community(community.community_id, john.user_id) is True

        assert community_service.find_community_admins_by_id(community.community_id) == []
        assert user_service.get_user_details(john.user_id).community_ids == set()

    def test_remove_admin_not_in_community(self, community_service, create_user):
        john = create_user()
        ann = create_user(email="ann@mail.com", name="Ann")
        community = _community(community_service, john.user_id)

        assert community_service.remove_admin_from_community(community.community_id, ann.user_id) is False
        assert community_service.remove_admin_from_community("missing", john.user_id) is False


class TestHouses:
    def test_add_houses_skips_duplicates_in_batch(self, community_service):
        community = _community(community_service)

        added = community_service.add_houses_to_community(
            community.community_id,
            [HouseCreate(name="House A"), HouseCreate(name="House A"), HouseCreate(name="House B")],
        )

        assert len(added) == 2
        houses = community_service.find_community_houses_by_id(community.community_id)
        assert {house.house_id for house in houses} == added
        assert sorted(house.name for house in houses) == ["House A", "House B"]

    def test_add_houses_skips_existing_house(self, community_service):
        community = _community(community_service)
        (house_id,) = community_service.add_houses_to_community(
            community.community_id, [HouseCreate(name="House A")]
        )

        added = community_service.add_houses_to_community(
            community.community_id, [HouseCreate(name="House A", house_id=house_id)]
        )

        assert added == set()
        assert len(community_service.find_community_houses_by_id(community.community_id)) == 1

    def test_add_houses_to_missing_community(self, community_service):
        assert community_service.add_houses_to_community("missing", [HouseCreate(name="House A")]) == set()

    def test_find_houses_of_missing_community(self, community_service):
        assert community_service.find_community_houses_by_id("missing") is None

    def test_remove_house_detaches_members(self, community_service, house_service, session_factory):
        community = _community(community_service)
        (house_id,) = community_service.add_houses_to_community(
            community.community_id, [HouseCreate(name="House A")]
        )
        members = house_service.add_house_members(
            house_id, [HouseMemberCreate(name="Tom"), HouseMemberCreate(name="Kate")]
        )

        assert community_service.remove_house_from_community_by_house_id(
            community.community_id, house_id
        ) is True

        assert community_service.find_community_houses_by_id(community.community_id) == []
        assert house_service.get_house_details_by_id(house_id) is None
        with UnitOfWork(session_factory) as uow:
            member_repo = uow.get_repo(HouseMemberRepository)
            for member in members:
                stored = member_repo.find_by_member_id(member.member_id)
                assert stored is not None
                assert stored.community_house is None

    def test_remove_house_requires_community(self, community_service, house_service):
        community = _community(community_service)
        other = _community(community_service)
        (house_id,) = community_service.add_houses_to_community(
            community.community_id, [HouseCreate(name="House A")]
        )

        assert community_service.remove_house_from_community_by_house_id(None, house_id) is False
        assert community_service.remove_house_from_community_by_house_id("missing", house_id) is False
        assert community_service.remove_house_from_community_by_house_id(
            other.community_id, house_id
        ) is False
        assert community_service.remove_house_from_community_by_house_id(
            community.community_id, "missing"
        ) is False
        assert house_service.get_house_details_by_id(house_id) is not None


class TestDeleteCommunity:
    def test_delete_cascades(
        self, community_service, house_service, amenity_service, session_factory, create_user
    ):
        john = create_user()
        community = _community(community_service, john.user_id)
        house_ids = community_service.add_houses_to_community(
            community.community_id, [HouseCreate(name="House A"), HouseCreate(name="House B")]
        )
        for house_id in house_ids:
            house_service.add_house_members(house_id, [HouseMemberCreate(name="Resident")])
        amenity_service.create_amenities(
            [AmenityCreate(name="Pool", description="Outdoor pool", price=Decimal("10.00"))],
            community.community_id,
        )

        assert community_service.delete_community(community.community_id) is True

        assert community_service.get_community_details_by_id(community.community_id) is None
        assert _count(session_factory, CommunityHouse) == 0
        assert _count(session_factory, Amenity) == 0
        assert _count(session_factory, HouseMember) == 2
        with UnitOfWork(session_factory) as uow:
            user = uow.get_repo(UserRepository).find_by_user_id_with_communities(john.user_id)
            assert user is not None
            assert user.communities == set()

    def test_delete_missing_community(self, community_service):
        assert community_service.delete_community("missing") is False
