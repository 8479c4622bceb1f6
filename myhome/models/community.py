# models/community.py
from typing import Set, Union, TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from myhome.db.base import Base
from myhome.models.base import BaseEntity

if TYPE_CHECKING:
    from myhome.models.amenity import Amenity
    from myhome.models.house_member import HouseMember
    from myhome.models.user import User


community_admins = Table(
    "community_admins",
    Base.metadata,
    Column("community_id", ForeignKey("communities.id", ondelete="CASCADE"), primary_key=True),
    Column("admin_id", ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class Community(BaseEntity):
    __tablename__ = "communities"

    community_id: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255))
    district: Mapped[str] = mapped_column(String(255))

    # Relationships
    admins: Mapped[Set["User"]] = relationship(
        secondary=community_admins, back_populates="communities"
    )
    houses: Mapped[Set["CommunityHouse"]] = relationship(back_populates="community")
    amenities: Mapped[Set["Amenity"]] = relationship(
        back_populates="community", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Community community_id={self.community_id!r} name={self.name!r}>"


class CommunityHouse(BaseEntity):
    __tablename__ = "community_houses"

    house_id: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255))
    community_id: Mapped[Union[int, None]] = mapped_column(
        ForeignKey("communities.id"), nullable=True, index=True
    )

    community: Mapped[Union["Community", None]] = relationship(back_populates="houses")
    house_members: Mapped[Set["HouseMember"]] = relationship(back_populates="community_house")

    def __repr__(self) -> str:
        return f"<CommunityHouse house_id={self.house_id!r} name={self.name!r}>"
