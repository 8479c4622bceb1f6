# myhome/services/community/house_service.py
from __future__ import annotations

import logging
import uuid
from typing import Callable, Iterable, List, Optional

from sqlalchemy.orm import Session

from myhome.models import HouseMember
from myhome.repositories import CommunityHouseRepository, HouseMemberRepository
from myhome.schemas.community import HouseMemberCreate, HouseMemberRecord, HouseRecord
from myhome.services.common import UnitOfWork

logger = logging.getLogger(__name__)


class HouseService:
    """
    Houses and their members.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def list_all_houses(self, skip: int = 0, limit: Optional[int] = 200) -> List[HouseRecord]:
        with UnitOfWork(self._session_factory) as uow:
            houses = uow.get_repo(CommunityHouseRepository).list_all(skip=skip, limit=limit)
            return [HouseRecord.model_validate(house) for house in houses]

    def get_house_details_by_id(self, house_id: str) -> Optional[HouseRecord]:
        with UnitOfWork(self._session_factory) as uow:
            house = uow.get_repo(CommunityHouseRepository).find_by_house_id(house_id)
            return HouseRecord.model_validate(house) if house is not None else None

    def add_house_members(
        self, house_id: str, members: Iterable[HouseMemberCreate]
    ) -> List[HouseMemberRecord]:
        """Create members in the house. Unknown house adds nothing."""
        with UnitOfWork(self._session_factory) as uow:
            house_repo = uow.get_repo(CommunityHouseRepository)
            house = house_repo.find_by_house_id_with_house_members(house_id)
            if house is None:
                return []

            new_members = [
                HouseMember(member_id=str(uuid.uuid4()), name=member.name, community_house=house)
                for member in members
            ]
            saved = uow.get_repo(HouseMemberRepository).save_all(new_members)
            house.house_members.update(saved)
            house_repo.save(house)
            logger.info(f"Added {len(saved)} member(s) to house {house_id}")
            return [HouseMemberRecord.model_validate(member) for member in saved]

    def delete_member_from_house(self, house_id: str, member_id: str) -> bool:
        """
        Detach a member from its house.

        The member row survives with a null house reference.
        """
        with UnitOfWork(self._session_factory) as uow:
            house_repo = uow.get_repo(CommunityHouseRepository)
            house = house_repo.find_by_house_id_with_house_members(house_id)
            if house is None:
                return False

            member = next((m for m in house.house_members if m.member_id == member_id), None)
            if member is None:
                return False

            house.house_members.remove(member)
            house_repo.save(house)
            member.community_house = None
            uow.get_repo(HouseMemberRepository).save(member)
            logger.info(f"Member {member_id} removed from house {house_id}")
            return True

    def get_house_members_by_id(
        self, house_id: str, skip: int = 0, limit: Optional[int] = 200
    ) -> List[HouseMemberRecord]:
        with UnitOfWork(self._session_factory) as uow:
            members = uow.get_repo(HouseMemberRepository).find_all_by_house_id(
                house_id, skip=skip, limit=limit
            )
            return [HouseMemberRecord.model_validate(member) for member in members]

    def list_house_members_for_houses_of_user_id(
        self, user_id: str, skip: int = 0, limit: Optional[int] = 200
    ) -> List[HouseMemberRecord]:
        """Members of all houses in the communities administered by ``user_id``."""
        with UnitOfWork(self._session_factory) as uow:
            members = uow.get_repo(HouseMemberRepository).find_all_by_community_admin_user_id(
                user_id, skip=skip, limit=limit
            )
            return [HouseMemberRecord.model_validate(member) for member in members]
