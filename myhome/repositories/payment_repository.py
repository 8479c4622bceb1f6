# myhome/repositories/payment_repository.py
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from myhome.models import HouseMember, Payment, User
from myhome.repositories.base import BaseRepository


class PaymentRepository(BaseRepository[Payment]):
    def __init__(self, session: Session):
        super().__init__(session, Payment)

    def _with_parties(self):
        return self._base_select().options(
            selectinload(Payment.admin), selectinload(Payment.member)
        )

    def find_by_payment_id(self, payment_id: str) -> Optional[Payment]:
        stmt = self._with_parties().where(Payment.payment_id == payment_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def find_all_by_member_id(self, member_id: str) -> List[Payment]:
        stmt = (
            self._with_parties()
            .join(Payment.member)
            .where(HouseMember.member_id == member_id)
            .order_by(Payment.id)
        )
        return list(self.session.execute(stmt).scalars().all())

    def find_all_by_admin_id(
        self, admin_id: str, *, skip: int = 0, limit: Optional[int] = None
    ) -> List[Payment]:
        stmt = (
            self._with_parties()
            .join(Payment.admin)
            .where(User.user_id == admin_id)
            .order_by(Payment.id)
            .offset(skip)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.execute(stmt).scalars().all())
