"""
Base repository with the CRUD operations shared by every entity repository.

Repositories only flush; committing is the job of the surrounding
``UnitOfWork``.
"""

from typing import Generic, Iterable, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from myhome.config.logging import get_logger
from myhome.core.exceptions import RepositoryError
from myhome.models.base import BaseEntity

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=BaseEntity)


class BaseRepository(Generic[ModelType]):
    def __init__(self, session: Session, model: Type[ModelType]):
        self.session = session
        self.model = model

    def _base_select(self) -> Select:
        return select(self.model)

    # ==================== Read Operations ====================

    def list_all(self, skip: int = 0, limit: Optional[int] = None) -> List[ModelType]:
        stmt = self._base_select().order_by(self.model.id).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.execute(stmt).scalars().all())

    # ==================== Write Operations ====================

    def save(self, entity: ModelType) -> ModelType:
        """Add the entity to the session and flush it."""
        try:
            self.session.add(entity)
            self.session.flush()
            return entity
        except SQLAlchemyError as e:
            logger.error(f"Save failed for {self.model.__name__}: {str(e)}")
            raise RepositoryError(f"Save failed: {str(e)}") from e

    def save_all(self, entities: Iterable[ModelType]) -> List[ModelType]:
        entities = list(entities)
        try:
            self.session.add_all(entities)
            self.session.flush()
            return entities
        except SQLAlchemyError as e:
            logger.error(f"Bulk save failed for {self.model.__name__}: {str(e)}")
            raise RepositoryError(f"Bulk save failed: {str(e)}") from e

    def delete(self, entity: ModelType) -> None:
        try:
            self.session.delete(entity)
            self.session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Delete failed for {self.model.__name__}: {str(e)}")
            raise RepositoryError(f"Delete failed: {str(e)}") from e
