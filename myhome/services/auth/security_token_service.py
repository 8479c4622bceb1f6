# myhome/services/auth/security_token_service.py
"""
Issuing and consuming single-use security tokens.
"""
from __future__ import annotations

import logging
import uuid
from datetime import date, timedelta
from typing import Callable

from sqlalchemy.orm import Session

from myhome.config.settings import TokenSettings
from myhome.models import SecurityToken, SecurityTokenType, User
from myhome.repositories import SecurityTokenRepository
from myhome.services.common import UnitOfWork

logger = logging.getLogger(__name__)


def expiry_date_after(creation_date: date, lifetime: timedelta) -> date:
    """Expiry is day-granular: the lifetime is truncated to whole days."""
    return creation_date + timedelta(days=lifetime.days)


class SecurityTokenService:
    """
    Creates email-confirmation and password-reset tokens and marks them used.

    Tokens are joined to the caller's unit of work, so the owner passed in
    must belong to the current session.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        token_settings: TokenSettings,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._session_factory = session_factory
        self._token_settings = token_settings
        self._today = today

    def create_email_confirm_token(self, token_owner: User) -> SecurityToken:
        return self._create_security_token(
            SecurityTokenType.EMAIL_CONFIRM,
            self._token_settings.email_token_lifetime,
            token_owner,
        )

    def create_password_reset_token(self, token_owner: User) -> SecurityToken:
        return self._create_security_token(
            SecurityTokenType.RESET,
            self._token_settings.reset_token_lifetime,
            token_owner,
        )

    def use_token(self, token: SecurityToken) -> SecurityToken:
        with UnitOfWork(self._session_factory) as uow:
            token.is_used = True
            token = uow.get_repo(SecurityTokenRepository).save(token)
            logger.info(f"Security token of type {token.token_type.value} used")
            return token

    def _create_security_token(
        self,
        token_type: SecurityTokenType,
        lifetime: timedelta,
        token_owner: User,
    ) -> SecurityToken:
        creation_date = self._today()
        with UnitOfWork(self._session_factory) as uow:
            token = SecurityToken(
                token_type=token_type,
                token=str(uuid.uuid4()),
                creation_date=creation_date,
                expiry_date=expiry_date_after(creation_date, lifetime),
                is_used=False,
            )
            token.token_owner = token_owner
            token = uow.get_repo(SecurityTokenRepository).save(token)
            logger.info(
                f"Issued {token_type.value} token for user {token_owner.user_id}, "
                f"expires {token.expiry_date.isoformat()}"
            )
            return token
