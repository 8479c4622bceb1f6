# models/base.py
from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from myhome.db.base import Base


class BaseEntity(Base):
    """
    Base for all persisted entities.

    - integer surrogate primary key
    - business identifiers (user_id, community_id, ...) live on subclasses
    """
    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
