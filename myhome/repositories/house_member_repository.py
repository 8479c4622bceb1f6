# myhome/repositories/house_member_repository.py
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from myhome.models import Community, CommunityHouse, HouseMember, User
from myhome.repositories.base import BaseRepository


class HouseMemberRepository(BaseRepository[HouseMember]):
    def __init__(self, session: Session):
        super().__init__(session, HouseMember)

    def find_by_member_id(self, member_id: str) -> Optional[HouseMember]:
        stmt = self._base_select().where(HouseMember.member_id == member_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def find_by_member_id_with_document(self, member_id: str) -> Optional[HouseMember]:
        stmt = (
            self._base_select()
            .options(selectinload(HouseMember.house_member_document))
            .where(HouseMember.member_id == member_id)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def find_all_by_house_id(
        self, house_id: str, *, skip: int = 0, limit: Optional[int] = None
    ) -> List[HouseMember]:
        stmt = (
            self._base_select()
            .join(HouseMember.community_house)
            .where(CommunityHouse.house_id == house_id)
            .order_by(HouseMember.id)
            .offset(skip)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.execute(stmt).scalars().all())

    def find_all_by_community_admin_user_id(
        self, user_id: str, *, skip: int = 0, limit: Optional[int] = None
    ) -> List[HouseMember]:
        """Members of every house in every community the user administers."""
        stmt = (
            self._base_select()
            .join(HouseMember.community_house)
            .join(CommunityHouse.community)
            .join(Community.admins)
            .where(User.user_id == user_id)
            .order_by(HouseMember.id)
            .distinct()
            .offset(skip)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.execute(stmt).scalars().all())
