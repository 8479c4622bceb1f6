# myhome/repositories/community_repository.py
from typing import List, Optional

from sqlalchemy import exists, select
from sqlalchemy.orm import Session, selectinload

from myhome.models import Community, CommunityHouse
from myhome.repositories.base import BaseRepository


class CommunityRepository(BaseRepository[Community]):
    def __init__(self, session: Session):
        super().__init__(session, Community)

    def find_by_community_id(self, community_id: str) -> Optional[Community]:
        stmt = self._base_select().where(Community.community_id == community_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def find_by_community_id_with_admins(self, community_id: str) -> Optional[Community]:
        stmt = (
            self._base_select()
            .options(selectinload(Community.admins))
            .where(Community.community_id == community_id)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def find_by_community_id_with_houses(self, community_id: str) -> Optional[Community]:
        stmt = (
            self._base_select()
            .options(selectinload(Community.houses))
            .where(Community.community_id == community_id)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def find_by_community_id_with_amenities(self, community_id: str) -> Optional[Community]:
        stmt = (
            self._base_select()
            .options(selectinload(Community.amenities))
            .where(Community.community_id == community_id)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def exists_by_community_id(self, community_id: str) -> bool:
        stmt = select(exists().where(Community.community_id == community_id))
        return bool(self.session.execute(stmt).scalar())


class CommunityHouseRepository(BaseRepository[CommunityHouse]):
    def __init__(self, session: Session):
        super().__init__(session, CommunityHouse)

    def find_by_house_id(self, house_id: str) -> Optional[CommunityHouse]:
        stmt = self._base_select().where(CommunityHouse.house_id == house_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def find_by_house_id_with_house_members(self, house_id: str) -> Optional[CommunityHouse]:
        stmt = (
            self._base_select()
            .options(selectinload(CommunityHouse.house_members))
            .where(CommunityHouse.house_id == house_id)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def find_all_by_community_id(
        self, community_id: str, *, skip: int = 0, limit: Optional[int] = None
    ) -> List[CommunityHouse]:
        stmt = (
            self._base_select()
            .join(CommunityHouse.community)
            .where(Community.community_id == community_id)
            .order_by(CommunityHouse.id)
            .offset(skip)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.execute(stmt).scalars().all())

    def delete_by_house_id(self, house_id: str) -> None:
        house = self.find_by_house_id(house_id)
        if house is not None:
            self.delete(house)

