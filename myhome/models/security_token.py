# models/security_token.py
from datetime import date
from enum import Enum
from typing import Union, TYPE_CHECKING

from sqlalchemy import Boolean, Date, Enum as SAEnum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from myhome.models.base import BaseEntity

if TYPE_CHECKING:
    from myhome.models.user import User


class SecurityTokenType(str, Enum):
    EMAIL_CONFIRM = "EMAIL_CONFIRM"
    RESET = "RESET"


class SecurityToken(BaseEntity):
    """
    Single-use, date-bounded credential for email confirmation or password reset.

    Tokens are never deleted. Once detached from their owner they remain as an
    audit trail with a null owner.
    """
    __tablename__ = "security_tokens"

    token_type: Mapped[SecurityTokenType] = mapped_column(
        SAEnum(SecurityTokenType, name="security_token_type")
    )
    token: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    creation_date: Mapped[date] = mapped_column(Date)
    expiry_date: Mapped[date] = mapped_column(Date)
    is_used: Mapped[bool] = mapped_column(Boolean, default=False)
    token_owner_id: Mapped[Union[int, None]] = mapped_column(
        ForeignKey("users.id"), nullable=True, index=True
    )

    token_owner: Mapped[Union["User", None]] = relationship(back_populates="user_tokens")

    def is_valid_for(self, token_type: SecurityTokenType, token: str, today: date) -> bool:
        """Unused, matching type and value, and not expired as of ``today``."""
        return (
            not self.is_used
            and self.token_type == token_type
            and self.token == token
            and self.expiry_date >= today
        )

    def __repr__(self) -> str:
        return f"<SecurityToken type={self.token_type.value} used={self.is_used} expires={self.expiry_date}>"
