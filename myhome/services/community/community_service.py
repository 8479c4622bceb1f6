# myhome/services/community/community_service.py
"""
Community graph mutations: admins, houses and cascading removal.

Removal order matters. A house is taken out of its community's house set
before its members are detached, member ids are collected before any
member is touched, and the house row is deleted last.
"""
from __future__ import annotations

import logging
import uuid
from typing import Callable, Iterable, List, Optional, Set

from sqlalchemy.orm import Session

from myhome.models import Community, CommunityHouse
from myhome.repositories import (
    CommunityHouseRepository,
    CommunityRepository,
    UserRepository,
)
from myhome.schemas.community import (
    CommunityCreate,
    CommunityDetails,
    CommunityRecord,
    HouseCreate,
    HouseRecord,
)
from myhome.schemas.user import UserRecord
from myhome.services.common import UnitOfWork
from myhome.services.community.house_service import HouseService

logger = logging.getLogger(__name__)


def _details(community: Community) -> CommunityDetails:
    return CommunityDetails(
        community_id=community.community_id,
        name=community.name,
        district=community.district,
        admins=sorted(
            (UserRecord.from_user(admin) for admin in community.admins),
            key=lambda record: record.user_id,
        ),
    )


class CommunityService:
    def __init__(self, session_factory: Callable[[], Session], house_service: HouseService) -> None:
        self._session_factory = session_factory
        self._house_service = house_service

    # ------------------------------------------------------------------ #
    # Communities
    # ------------------------------------------------------------------ #
    def create_community(self, data: CommunityCreate, creator_user_id: str) -> CommunityDetails:
        """Create a community administered by its creator, when the creator exists."""
        with UnitOfWork(self._session_factory) as uow:
            community = Community(
                community_id=str(uuid.uuid4()),
                name=data.name,
                district=data.district,
            )
            creator = uow.get_repo(UserRepository).find_by_user_id_with_communities(creator_user_id)
            if creator is not None:
                community.admins = {creator}
            community = uow.get_repo(CommunityRepository).save(community)
            logger.info(f"Community {community.community_id} created by {creator_user_id}")
            return _details(community)

    def list_all(self, skip: int = 0, limit: Optional[int] = 200) -> List[CommunityRecord]:
        with UnitOfWork(self._session_factory) as uow:
            communities = uow.get_repo(CommunityRepository).list_all(skip=skip, limit=limit)
            return [CommunityRecord.model_validate(c) for c in communities]

    def get_community_details_by_id(self, community_id: str) -> Optional[CommunityRecord]:
        with UnitOfWork(self._session_factory) as uow:
            community = uow.get_repo(CommunityRepository).find_by_community_id(community_id)
            return CommunityRecord.model_validate(community) if community is not None else None

    def get_community_details_by_id_with_admins(self, community_id: str) -> Optional[CommunityDetails]:
        with UnitOfWork(self._session_factory) as uow:
            community = uow.get_repo(CommunityRepository).find_by_community_id_with_admins(community_id)
            return _details(community) if community is not None else None

    def delete_community(self, community_id: str) -> bool:
        """Remove every house (detaching its members) and then the community itself."""
        with UnitOfWork(self._session_factory) as uow:
            community_repo = uow.get_repo(CommunityRepository)
            community = community_repo.find_by_community_id_with_houses(community_id)
            if community is None:
                return False

            house_ids = {house.house_id for house in community.houses}
            for house_id in house_ids:
                self._remove_house(uow, community, house_id)
            community_repo.delete(community)
            logger.info(f"Community {community_id} deleted with {len(house_ids)} house(s)")
            return True

    # ------------------------------------------------------------------ #
    # Admins
    # ------------------------------------------------------------------ #
    def find_community_admins_by_id(
        self, community_id: str, skip: int = 0, limit: Optional[int] = 200
    ) -> Optional[List[UserRecord]]:
        """Admins of the community, or ``None`` when it does not exist."""
        with UnitOfWork(self._session_factory) as uow:
            if not uow.get_repo(CommunityRepository).exists_by_community_id(community_id):
                return None
            admins = uow.get_repo(UserRepository).find_all_by_community_id(
                community_id, skip=skip, limit=limit
            )
            return [UserRecord.from_user(admin) for admin in admins]

    def find_community_admin_by_id(self, user_id: str) -> Optional[UserRecord]:
        with UnitOfWork(self._session_factory) as uow:
            user = uow.get_repo(UserRepository).find_by_user_id(user_id)
            return UserRecord.from_user(user) if user is not None else None

    def add_admins_to_community(
        self, community_id: str, admin_ids: Iterable[str]
    ) -> Optional[CommunityDetails]:
        """Add existing users as admins. Unknown user ids are ignored."""
        with UnitOfWork(self._session_factory) as uow:
            community_repo = uow.get_repo(CommunityRepository)
            community = community_repo.find_by_community_id_with_admins(community_id)
            if community is None:
                return None

            admins = uow.get_repo(UserRepository).find_all_by_user_ids(list(set(admin_ids)))
            for admin in admins:
                # back_populates keeps admin.communities in step
                community.admins.add(admin)
            community = community_repo.save(community)
            return _details(community)

    def remove_admin_from_community(self, community_id: str, admin_id: str) -> bool:
        with UnitOfWork(self._session_factory) as uow:
            community_repo = uow.get_repo(CommunityRepository)
            community = community_repo.find_by_community_id_with_admins(community_id)
            if community is None:
                return False

            admin = next((a for a in community.admins if a.user_id == admin_id), None)
            if admin is None:
                return False

            community.admins.remove(admin)
            community_repo.save(community)
            logger.info(f"Admin {admin_id} removed from community {community_id}")
            return True

    # ------------------------------------------------------------------ #
    # Houses
    # ------------------------------------------------------------------ #
    def find_community_houses_by_id(
        self, community_id: str, skip: int = 0, limit: Optional[int] = 200
    ) -> Optional[List[HouseRecord]]:
        """Houses of the community, or ``None`` when it does not exist."""
        with UnitOfWork(self._session_factory) as uow:
            if not uow.get_repo(CommunityRepository).exists_by_community_id(community_id):
                return None
            houses = uow.get_repo(CommunityHouseRepository).find_all_by_community_id(
                community_id, skip=skip, limit=limit
            )
            return [HouseRecord.model_validate(house) for house in houses]

    def add_houses_to_community(self, community_id: str, houses: Iterable[HouseCreate]) -> Set[str]:
        """
        Add houses to the community and return the generated house ids.

        A house whose (house_id, name) pair already exists in the community,
        or repeats one earlier in the same batch, is skipped.
        """
        with UnitOfWork(self._session_factory) as uow:
            community_repo = uow.get_repo(CommunityRepository)
            community = community_repo.find_by_community_id_with_houses(community_id)
            if community is None:
                return set()

            house_repo = uow.get_repo(CommunityHouseRepository)
            seen = {(house.house_id, house.name) for house in community.houses}
            added_ids: Set[str] = set()
            for house in houses:
                if house is None or (house.house_id, house.name) in seen:
                    continue
                seen.add((house.house_id, house.name))

                new_house = CommunityHouse(house_id=str(uuid.uuid4()), name=house.name)
                new_house.community = community
                house_repo.save(new_house)
                added_ids.add(new_house.house_id)

            community_repo.save(community)
            logger.info(f"Added {len(added_ids)} house(s) to community {community_id}")
            return added_ids

    def remove_house_from_community_by_house_id(
        self, community_id: Optional[str], house_id: str
    ) -> bool:
        if community_id is None:
            return False
        with UnitOfWork(self._session_factory) as uow:
            community = uow.get_repo(CommunityRepository).find_by_community_id_with_houses(community_id)
            if community is None:
                return False
            return self._remove_house(uow, community, house_id)

    def _remove_house(self, uow: UnitOfWork, community: Community, house_id: str) -> bool:
        house_repo = uow.get_repo(CommunityHouseRepository)
        house = house_repo.find_by_house_id_with_house_members(house_id)
        if house is None or house not in community.houses:
            return False

        community.houses.remove(house)
        member_ids = {member.member_id for member in house.house_members}
        for member_id in member_ids:
            self._house_service.delete_member_from_house(house_id, member_id)
        uow.get_repo(CommunityRepository).save(community)
        house_repo.delete_by_house_id(house_id)
        logger.info(
            f"House {house_id} removed from community {community.community_id}, "
            f"{len(member_ids)} member(s) detached"
        )
        return True
