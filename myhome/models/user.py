# models/user.py
from typing import Set, TYPE_CHECKING

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from myhome.models.base import BaseEntity

if TYPE_CHECKING:
    from myhome.models.community import Community
    from myhome.models.security_token import SecurityToken


class User(BaseEntity):
    """
    Registered account. Administers zero or more communities.
    """
    __tablename__ = "users"

    user_id: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    encrypted_password: Mapped[str] = mapped_column(String(255))
    email_confirmed: Mapped[bool] = mapped_column(Boolean, default=False)

    # Relationships
    user_tokens: Mapped[Set["SecurityToken"]] = relationship(back_populates="token_owner")
    communities: Mapped[Set["Community"]] = relationship(
        secondary="community_admins", back_populates="admins"
    )

    def __repr__(self) -> str:
        return f"<User user_id={self.user_id!r} email={self.email!r}>"
