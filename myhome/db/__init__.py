from myhome.db.base import Base
from myhome.db.session import build_engine, create_session_factory, get_engine, get_session_factory

__all__ = ["Base", "build_engine", "create_session_factory", "get_engine", "get_session_factory"]
