# myhome/services/common/unit_of_work.py
"""
Transaction scope for the service layer.

Every public service method opens a ``UnitOfWork``. Services that call
other services share one transaction because the session factory is a
thread-scoped ``scoped_session``: inner units of work see the depth
counter left in ``session.info`` by the outer one and do not commit.
"""
from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from myhome.core.exceptions import TransactionError
from myhome.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

TRepository = TypeVar("TRepository", bound=BaseRepository)

_DEPTH_KEY = "uow_depth"


class UnitOfWork(AbstractContextManager["UnitOfWork"]):
    """
    Re-entrant transaction around a thread-scoped session.

    The outermost block commits on a clean exit, rolls back when an
    exception escapes, and closes the session either way. Nested blocks
    only hand out repositories.

        >>> with UnitOfWork(session_factory) as uow:
        ...     user = uow.get_repo(UserRepository).find_by_user_id(user_id)
        ...     user.name = "Jane"
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory
        self.session: Optional[Session] = None
        self._outermost = False
        self._repositories: Dict[Type[BaseRepository], BaseRepository] = {}

    def __enter__(self) -> "UnitOfWork":
        if self.session is not None:
            raise RuntimeError("UnitOfWork is already active")

        session = self._session_factory()
        depth = session.info.get(_DEPTH_KEY, 0)
        session.info[_DEPTH_KEY] = depth + 1
        self.session = session
        self._outermost = depth == 0
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool:
        session = self.session
        if session is None:
            return False

        self.session = None
        self._repositories.clear()
        session.info[_DEPTH_KEY] -= 1
        if not self._outermost:
            return False

        try:
            if exc_type is not None:
                session.rollback()
                logger.debug(f"Transaction rolled back after {exc_type.__name__}")
            else:
                self._commit(session)
        finally:
            session.info.pop(_DEPTH_KEY, None)
            session.close()
        return False

    @staticmethod
    def _commit(session: Session) -> None:
        try:
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error(f"Commit failed: {exc}")
            raise TransactionError("Failed to commit transaction", exc) from exc

    def get_repo(self, repo_cls: Type[TRepository]) -> TRepository:
        """Repository of ``repo_cls`` bound to this session, created once per block."""
        if self.session is None:
            raise RuntimeError("UnitOfWork is not active")

        repository = self._repositories.get(repo_cls)
        if repository is None:
            repository = repo_cls(self.session)
            self._repositories[repo_cls] = repository
        return repository  # type: ignore[return-value]

    @property
    def is_outermost(self) -> bool:
        return self._outermost
