"""
JWT session token utilities.

Encodes and decodes the signed session token handed out on login. The
token carries the user id as its subject and an expiration claim, and is
signed with an HMAC shared secret.
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict

from jose import ExpiredSignatureError, JWTError, jwt

from myhome.core.exceptions import ExpiredTokenError, InvalidTokenError, WeakKeyError

logger = logging.getLogger(__name__)

# Minimum secret length in bytes: the HMAC key must be at least as long
# as the hash output.
MIN_SECRET_BYTES = {
    "HS256": 32,
    "HS384": 48,
    "HS512": 64,
}


@dataclass(frozen=True)
class AppJwt:
    """Decoded session token."""
    user_id: str
    expiration: datetime


class JwtEncoderDecoder:
    """
    HMAC-signed JWT encoder/decoder.

    Example:
        >>> codec = JwtEncoderDecoder()
        >>> token = codec.encode(AppJwt(user_id="u1", expiration=expires), secret)
        >>> codec.decode(token, secret).user_id
        'u1'
    """

    DEFAULT_ALGORITHM = "HS512"

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM):
        if algorithm not in MIN_SECRET_BYTES:
            raise ValueError(f"Unsupported signing algorithm: {algorithm}")
        self.algorithm = algorithm

    def encode(self, app_jwt: AppJwt, secret: str) -> str:
        """
        Sign a session token.

        Raises:
            WeakKeyError: If the secret is too short for the algorithm
        """
        self._check_key_strength(secret)

        expiration = app_jwt.expiration
        if expiration.tzinfo is None:
            expiration = expiration.replace(tzinfo=timezone.utc)

        payload: Dict[str, Any] = {
            "sub": app_jwt.user_id,
            "exp": math.ceil(expiration.timestamp()),
        }
        return jwt.encode(payload, secret, algorithm=self.algorithm)

    def decode(self, encoded_jwt: str, secret: str) -> AppJwt:
        """
        Verify and decode a session token.

        Raises:
            WeakKeyError: If the secret is too short for the algorithm
            ExpiredTokenError: If the token is past its expiration
            InvalidTokenError: If the token is malformed or the signature does not verify
        """
        self._check_key_strength(secret)

        try:
            payload = jwt.decode(encoded_jwt, secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            logger.warning("Token verification failed: token expired")
            raise ExpiredTokenError() from exc
        except JWTError as exc:
            logger.warning(f"Token verification failed: {exc}")
            raise InvalidTokenError() from exc

        user_id = payload.get("sub")
        exp = payload.get("exp")
        if not user_id or exp is None:
            raise InvalidTokenError("Token is missing subject or expiration")

        return AppJwt(
            user_id=user_id,
            expiration=datetime.fromtimestamp(exp, tz=timezone.utc),
        )

    def _check_key_strength(self, secret: str) -> None:
        required = MIN_SECRET_BYTES[self.algorithm]
        actual = len(secret.encode("utf-8")) if secret else 0
        if actual < required:
            raise WeakKeyError(self.algorithm, required, actual)
