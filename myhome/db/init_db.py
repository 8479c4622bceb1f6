"""Database initialization utilities."""
import logging
from typing import Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from myhome.db.base import Base, import_models
from myhome.db.session import get_engine

logger = logging.getLogger(__name__)


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Initialize the database by creating all tables.

    Note: This is suitable for development/testing only.
    """
    engine = engine or get_engine()
    import_models()

    existing_tables = inspect(engine).get_table_names()
    if existing_tables:
        logger.info(f"Database already initialized with {len(existing_tables)} tables")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")
