"""SQLAlchemy Base class for all models."""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def import_models() -> None:
    """Import all models so they are registered with Base.metadata."""
    import myhome.models  # noqa: F401
