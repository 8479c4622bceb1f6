# myhome/services/user/user_service.py
"""
User accounts: registration, email confirmation and password reset.

Absence is reported with ``None`` / ``False`` rather than exceptions:
- duplicate email on registration returns ``None``
- unknown users and invalid, used or expired tokens return ``False``

Emails go out only after the unit of work has committed, so a failed
commit never leaves the user holding a link to a rolled-back token.
"""
from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from myhome.core.security import PasswordHasher
from myhome.models import SecurityToken, SecurityTokenType, User
from myhome.repositories import UserRepository
from myhome.schemas.user import UserCreate, UserRecord
from myhome.services.auth.security_token_service import SecurityTokenService
from myhome.services.common import UnitOfWork
from myhome.services.mail import Notifier

logger = logging.getLogger(__name__)


class UserService:
    def __init__(
        self,
        session_factory: Callable[[], Session],
        password_hasher: PasswordHasher,
        security_token_service: SecurityTokenService,
        notifier: Notifier,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._session_factory = session_factory
        self._hasher = password_hasher
        self._tokens = security_token_service
        self._notifier = notifier
        self._today = today

    # ------------------------------------------------------------------ #
    # Registration and lookup
    # ------------------------------------------------------------------ #
    def create_user(self, data: UserCreate) -> Optional[UserRecord]:
        with UnitOfWork(self._session_factory) as uow:
            user_repo = uow.get_repo(UserRepository)
            if user_repo.find_by_email(data.email) is not None:
                logger.info("Registration skipped: email already registered")
                return None

            user = User(
                user_id=str(uuid.uuid4()),
                name=data.name,
                email=data.email,
                encrypted_password=self._hasher.hash(data.password),
                email_confirmed=False,
            )
            user = user_repo.save(user)
            email_confirm_token = self._tokens.create_email_confirm_token(user)
            record = UserRecord.from_user(user)

        logger.info(f"User {record.user_id} created")
        self._notifier.send_account_created(user, email_confirm_token)
        return record

    def list_all(self, skip: int = 0, limit: Optional[int] = 200) -> List[UserRecord]:
        with UnitOfWork(self._session_factory) as uow:
            users = uow.get_repo(UserRepository).list_all(skip=skip, limit=limit)
            return [UserRecord.from_user(user) for user in users]

    def get_user_details(self, user_id: str) -> Optional[UserRecord]:
        """User with the ids of the communities they administer."""
        with UnitOfWork(self._session_factory) as uow:
            user = uow.get_repo(UserRepository).find_by_user_id_with_communities(user_id)
            if user is None:
                return None
            return UserRecord.from_user(user, with_communities=True)

    def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        with UnitOfWork(self._session_factory) as uow:
            user = uow.get_repo(UserRepository).find_by_email(email)
            if user is None:
                return None
            return UserRecord.from_user(user)

    # ------------------------------------------------------------------ #
    # Password reset
    # ------------------------------------------------------------------ #
    def request_reset_password(self, email: str) -> bool:
        with UnitOfWork(self._session_factory) as uow:
            user_repo = uow.get_repo(UserRepository)
            user = user_repo.find_by_email_with_tokens(email)
            if user is None:
                return False

            reset_token = self._tokens.create_password_reset_token(user)
            user.user_tokens.add(reset_token)
            user_repo.save(user)

        return self._notifier.send_password_recover_code(user, reset_token.token)

    def reset_password(self, email: str, token: str, new_password: str) -> bool:
        with UnitOfWork(self._session_factory) as uow:
            user_repo = uow.get_repo(UserRepository)
            user = user_repo.find_by_email_with_tokens(email)
            if user is None:
                return False

            reset_token = self._find_valid_user_token(user, SecurityTokenType.RESET, token)
            if reset_token is None:
                logger.info(f"Password reset rejected for user {user.user_id}: no valid token")
                return False

            self._tokens.use_token(reset_token)
            user.encrypted_password = self._hasher.hash(new_password)
            user_repo.save(user)

        logger.info(f"Password changed for user {user.user_id}")
        return self._notifier.send_password_successfully_changed(user)

    # ------------------------------------------------------------------ #
    # Email confirmation
    # ------------------------------------------------------------------ #
    def confirm_email(self, user_id: str, token: str) -> bool:
        with UnitOfWork(self._session_factory) as uow:
            user_repo = uow.get_repo(UserRepository)
            user = user_repo.find_by_user_id_with_tokens(user_id)
            if user is None or user.email_confirmed:
                return False

            email_token = self._find_valid_user_token(user, SecurityTokenType.EMAIL_CONFIRM, token)
            if email_token is None:
                return False

            user.email_confirmed = True
            user_repo.save(user)
            self._tokens.use_token(email_token)

        logger.info(f"Email confirmed for user {user.user_id}")
        self._notifier.send_account_confirmed(user)
        return True

    def resend_email_confirm(self, user_id: str) -> bool:
        with UnitOfWork(self._session_factory) as uow:
            user_repo = uow.get_repo(UserRepository)
            user = user_repo.find_by_user_id_with_tokens(user_id)
            if user is None or user.email_confirmed:
                return False

            new_token = self._tokens.create_email_confirm_token(user)
            stale_tokens = [
                t for t in user.user_tokens
                if t is not new_token
                and t.token_type == SecurityTokenType.EMAIL_CONFIRM
                and not t.is_used
            ]
            for stale in stale_tokens:
                user.user_tokens.discard(stale)
            user_repo.save(user)

        logger.info(
            f"Email confirm token reissued for user {user.user_id}, "
            f"{len(stale_tokens)} stale token(s) dropped"
        )
        return self._notifier.send_account_created(user, new_token)

    def _find_valid_user_token(
        self, user: User, token_type: SecurityTokenType, token: str
    ) -> Optional[SecurityToken]:
        today = self._today()
        for user_token in user.user_tokens:
            if user_token.is_valid_for(token_type, token, today):
                return user_token
        return None
