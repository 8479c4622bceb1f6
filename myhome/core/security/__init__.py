"""Security module for password hashing and session tokens."""

from .password_hasher import PasswordHasher
from .jwt_handler import AppJwt, JwtEncoderDecoder, MIN_SECRET_BYTES

__all__ = [
    "PasswordHasher",
    "AppJwt",
    "JwtEncoderDecoder",
    "MIN_SECRET_BYTES",
]
