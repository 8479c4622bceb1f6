"""Database session management."""
from functools import lru_cache
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import scoped_session, sessionmaker

from myhome.config.settings import get_settings


def create_session_factory(engine: Engine) -> scoped_session:
    """
    Build a thread-scoped session factory bound to ``engine``.

    Every call made from the same thread returns the same ``Session`` until
    it is closed, so nested units of work share one transaction.

    Usage:
        >>> SessionLocal = create_session_factory(create_engine("sqlite://"))
        >>> session = SessionLocal()
    """
    return scoped_session(
        sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
    )


def build_engine(database_url: str, **engine_kwargs: Any) -> Engine:
    return create_engine(database_url, **engine_kwargs)


@lru_cache()
def get_engine() -> Engine:
    """Engine configured from application settings."""
    settings = get_settings()
    url = settings.get_database_url()
    if url.startswith("sqlite"):
        return build_engine(url, echo=settings.DB_ECHO)
    return build_engine(
        url,
        pool_pre_ping=True,
        echo=settings.DB_ECHO,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_POOL_OVERFLOW,
    )


@lru_cache()
def get_session_factory() -> scoped_session:
    """Session factory bound to the settings engine."""
    return create_session_factory(get_engine())
