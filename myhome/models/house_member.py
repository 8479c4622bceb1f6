# models/house_member.py
from typing import Union, TYPE_CHECKING

from sqlalchemy import ForeignKey, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from myhome.models.base import BaseEntity

if TYPE_CHECKING:
    from myhome.models.community import CommunityHouse


class HouseMember(BaseEntity):
    """
    Resident of a community house. Detached members keep their row with a
    null house reference.
    """
    __tablename__ = "house_members"

    member_id: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255))
    community_house_id: Mapped[Union[int, None]] = mapped_column(
        ForeignKey("community_houses.id"), nullable=True, index=True
    )

    community_house: Mapped[Union["CommunityHouse", None]] = relationship(back_populates="house_members")
    house_member_document: Mapped[Union["HouseMemberDocument", None]] = relationship(
        back_populates="house_member",
        cascade="all, delete-orphan",
        uselist=False,
    )

    def __repr__(self) -> str:
        return f"<HouseMember member_id={self.member_id!r} name={self.name!r}>"


class HouseMemberDocument(BaseEntity):
    __tablename__ = "house_member_documents"

    document_filename: Mapped[str] = mapped_column(String(255))
    document_content: Mapped[bytes] = mapped_column(LargeBinary)
    house_member_id: Mapped[Union[int, None]] = mapped_column(
        ForeignKey("house_members.id"), unique=True, nullable=True
    )

    house_member: Mapped[Union["HouseMember", None]] = relationship(back_populates="house_member_document")

    def __repr__(self) -> str:
        return f"<HouseMemberDocument filename={self.document_filename!r} size={len(self.document_content or b'')}>"
