# models/payment.py
from datetime import date
from decimal import Decimal
from typing import Union, TYPE_CHECKING

from sqlalchemy import Boolean, Date, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from myhome.models.base import BaseEntity

if TYPE_CHECKING:
    from myhome.models.house_member import HouseMember
    from myhome.models.user import User


class Payment(BaseEntity):
    """
    Charge scheduled by a community admin against a house member.
    """
    __tablename__ = "payments"

    payment_id: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    charge: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    type: Mapped[str] = mapped_column(String(100))
    description: Mapped[str] = mapped_column(String(500))
    recurring: Mapped[bool] = mapped_column(Boolean, default=False)
    due_date: Mapped[Union[date, None]] = mapped_column(Date, nullable=True)
    admin_id: Mapped[Union[int, None]] = mapped_column(ForeignKey("users.id"), nullable=True, index=True)
    member_id: Mapped[Union[int, None]] = mapped_column(
        ForeignKey("house_members.id"), nullable=True, index=True
    )

    admin: Mapped[Union["User", None]] = relationship()
    member: Mapped[Union["HouseMember", None]] = relationship()

    def __repr__(self) -> str:
        return f"<Payment payment_id={self.payment_id!r} charge={self.charge}>"
