# models/amenity.py
from datetime import datetime
from decimal import Decimal
from typing import Set, Union, TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from myhome.models.base import BaseEntity

if TYPE_CHECKING:
    from myhome.models.community import Community
    from myhome.models.user import User


class Amenity(BaseEntity):
    __tablename__ = "amenities"

    amenity_id: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    community_id: Mapped[Union[int, None]] = mapped_column(
        ForeignKey("communities.id"), nullable=True, index=True
    )

    community: Mapped[Union["Community", None]] = relationship(back_populates="amenities")
    booking_items: Mapped[Set["AmenityBookingItem"]] = relationship(
        back_populates="amenity", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Amenity amenity_id={self.amenity_id!r} name={self.name!r}>"


class AmenityBookingItem(BaseEntity):
    __tablename__ = "amenity_booking_items"

    amenity_booking_item_id: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    amenity_id: Mapped[Union[int, None]] = mapped_column(
        ForeignKey("amenities.id"), nullable=True, index=True
    )
    booking_start_date: Mapped[datetime] = mapped_column(DateTime)
    booking_end_date: Mapped[Union[datetime, None]] = mapped_column(DateTime, nullable=True)
    booking_user_id: Mapped[Union[int, None]] = mapped_column(ForeignKey("users.id"), nullable=True)

    amenity: Mapped[Union["Amenity", None]] = relationship(back_populates="booking_items")
    booking_user: Mapped[Union["User", None]] = relationship()

    def __repr__(self) -> str:
        return f"<AmenityBookingItem id={self.amenity_booking_item_id!r}>"
