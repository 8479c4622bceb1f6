"""
Payment schemas.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from pydantic import Field

from myhome.schemas.base import BaseCreateSchema, BaseSchema

if TYPE_CHECKING:
    from myhome.models import Payment

__all__ = ["PaymentCreate", "PaymentRecord"]


class PaymentCreate(BaseCreateSchema):
    charge: Decimal = Field(..., gt=0)
    type: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=500)
    recurring: bool = False
    due_date: Optional[date] = None
    admin_id: str = Field(..., description="user_id of the scheduling admin")
    member_id: str = Field(..., description="member_id of the charged house member")


class PaymentRecord(BaseSchema):
    payment_id: str
    charge: Decimal
    type: str
    description: str
    recurring: bool
    due_date: Optional[date] = None
    admin_id: Optional[str] = None
    member_id: Optional[str] = None

    @classmethod
    def from_payment(cls, payment: "Payment") -> "PaymentRecord":
        return cls(
            payment_id=payment.payment_id,
            charge=payment.charge,
            type=payment.type,
            description=payment.description,
            recurring=payment.recurring,
            due_date=payment.due_date,
            admin_id=payment.admin.user_id if payment.admin else None,
            member_id=payment.member.member_id if payment.member else None,
        )
