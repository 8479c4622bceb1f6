# myhome/services/auth/authentication_service.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy.orm import Session

from myhome.config.settings import TokenSettings
from myhome.core.exceptions import CredentialsIncorrectError, UserNotFoundError
from myhome.core.security import AppJwt, JwtEncoderDecoder, PasswordHasher
from myhome.repositories import UserRepository
from myhome.schemas.auth import AuthenticationData, LoginRequest
from myhome.services.common import UnitOfWork

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuthenticationService:
    """
    Credential verification and session token issuing.

    Unlike the other services, failures here raise:
    - UserNotFoundError when no account has the email
    - CredentialsIncorrectError when the password does not match
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        password_hasher: PasswordHasher,
        jwt_encoder_decoder: JwtEncoderDecoder,
        token_settings: TokenSettings,
        *,
        now: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._session_factory = session_factory
        self._hasher = password_hasher
        self._jwt = jwt_encoder_decoder
        self._token_settings = token_settings
        self._now = now

    def login(self, login_request: LoginRequest) -> AuthenticationData:
        logger.debug("Received login request")
        with UnitOfWork(self._session_factory) as uow:
            user = uow.get_repo(UserRepository).find_by_email(login_request.email)
            if user is None:
                logger.info("Login failed: unknown email")
                raise UserNotFoundError(login_request.email)

            user_id = user.user_id
            encrypted_password = user.encrypted_password

        if not self._hasher.verify(login_request.password, encrypted_password):
            logger.info(f"Login failed: wrong password for user {user_id}")
            raise CredentialsIncorrectError(user_id)

        app_jwt = AppJwt(
            user_id=user_id,
            expiration=self._now() + self._token_settings.jwt_lifetime,
        )
        encoded = self._jwt.encode(app_jwt, self._token_settings.secret)
        logger.info(f"User {user_id} logged in")
        return AuthenticationData(jwt_token=encoded, user_id=user_id)

    def authenticate(self, encoded_jwt: str) -> AppJwt:
        """Decode a session token issued by ``login``. Signer errors propagate."""
        return self._jwt.decode(encoded_jwt, self._token_settings.secret)
