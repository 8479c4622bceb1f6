# myhome/repositories/user_repository.py
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from myhome.models import Community, User
from myhome.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self, session: Session):
        super().__init__(session, User)

    def find_by_email(self, email: str) -> Optional[User]:
        stmt = self._base_select().where(User.email == email)
        return self.session.execute(stmt).scalar_one_or_none()

    def find_by_email_with_tokens(self, email: str) -> Optional[User]:
        stmt = (
            self._base_select()
            .options(selectinload(User.user_tokens))
            .where(User.email == email)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def find_by_user_id(self, user_id: str) -> Optional[User]:
        stmt = self._base_select().where(User.user_id == user_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def find_by_user_id_with_tokens(self, user_id: str) -> Optional[User]:
        stmt = (
            self._base_select()
            .options(selectinload(User.user_tokens))
            .where(User.user_id == user_id)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def find_by_user_id_with_communities(self, user_id: str) -> Optional[User]:
        stmt = (
            self._base_select()
            .options(selectinload(User.communities))
            .where(User.user_id == user_id)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def find_all_by_user_ids(self, user_ids: List[str]) -> List[User]:
        if not user_ids:
            return []
        stmt = (
            self._base_select()
            .options(selectinload(User.communities))
            .where(User.user_id.in_(user_ids))
        )
        return list(self.session.execute(stmt).scalars().all())

    def find_all_by_community_id(
        self, community_id: str, *, skip: int = 0, limit: Optional[int] = None
    ) -> List[User]:
        """Admins of the given community, ordered by insertion."""
        stmt = (
            self._base_select()
            .join(User.communities)
            .where(Community.community_id == community_id)
            .order_by(User.id)
            .offset(skip)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.execute(stmt).scalars().all())
