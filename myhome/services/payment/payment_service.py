# myhome/services/payment/payment_service.py
from __future__ import annotations

import logging
import uuid
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from myhome.models import Payment
from myhome.repositories import HouseMemberRepository, PaymentRepository, UserRepository
from myhome.schemas.community import HouseMemberRecord
from myhome.schemas.payment import PaymentCreate, PaymentRecord
from myhome.services.common import UnitOfWork

logger = logging.getLogger(__name__)


class PaymentService:
    """
    Payments scheduled by admins for house members.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def schedule_payment(self, request: PaymentCreate) -> Optional[PaymentRecord]:
        """
        Schedule a payment with a generated id.

        Returns ``None`` when the admin or the member does not exist.
        """
        with UnitOfWork(self._session_factory) as uow:
            admin = uow.get_repo(UserRepository).find_by_user_id(request.admin_id)
            member = uow.get_repo(HouseMemberRepository).find_by_member_id(request.member_id)
            if admin is None or member is None:
                logger.info(
                    f"Payment not scheduled: admin {request.admin_id} or "
                    f"member {request.member_id} not found"
                )
                return None

            payment = Payment(
                payment_id=str(uuid.uuid4()),
                charge=request.charge,
                type=request.type,
                description=request.description,
                recurring=request.recurring,
                due_date=request.due_date,
                admin=admin,
                member=member,
            )
            payment = uow.get_repo(PaymentRepository).save(payment)
            logger.info(f"Payment {payment.payment_id} scheduled for member {request.member_id}")
            return PaymentRecord.from_payment(payment)

    def get_payment_details(self, payment_id: str) -> Optional[PaymentRecord]:
        with UnitOfWork(self._session_factory) as uow:
            payment = uow.get_repo(PaymentRepository).find_by_payment_id(payment_id)
            return PaymentRecord.from_payment(payment) if payment is not None else None

    def get_house_member(self, member_id: str) -> Optional[HouseMemberRecord]:
        with UnitOfWork(self._session_factory) as uow:
            member = uow.get_repo(HouseMemberRepository).find_by_member_id(member_id)
            return HouseMemberRecord.model_validate(member) if member is not None else None

    def get_payments_by_member(self, member_id: str) -> List[PaymentRecord]:
        with UnitOfWork(self._session_factory) as uow:
            payments = uow.get_repo(PaymentRepository).find_all_by_member_id(member_id)
            return [PaymentRecord.from_payment(p) for p in payments]

    def get_payments_by_admin(
        self, admin_id: str, skip: int = 0, limit: Optional[int] = 200
    ) -> List[PaymentRecord]:
        with UnitOfWork(self._session_factory) as uow:
            payments = uow.get_repo(PaymentRepository).find_all_by_admin_id(
                admin_id, skip=skip, limit=limit
            )
            return [PaymentRecord.from_payment(p) for p in payments]
