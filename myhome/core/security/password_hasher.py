"""
bcrypt hashing for account passwords.

bcrypt only looks at the first 72 bytes of its input, so longer
passwords are reduced to their SHA-256 hex digest before hashing.
"""

import hashlib
import logging

import bcrypt

logger = logging.getLogger(__name__)

BCRYPT_MAX_PASSWORD_BYTES = 72


def _bcrypt_input(password: str) -> bytes:
    encoded = password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
        return hashlib.sha256(encoded).hexdigest().encode("ascii")
    return encoded


class PasswordHasher:
    """
    Salted bcrypt hashes stored in ``User.encrypted_password``.

    ``rounds`` is the bcrypt cost factor (4-31). Tests use the minimum.
    """

    DEFAULT_ROUNDS = 12
    MIN_ROUNDS = 4
    MAX_ROUNDS = 31

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        if not self.MIN_ROUNDS <= rounds <= self.MAX_ROUNDS:
            raise ValueError(
                f"bcrypt rounds must be in [{self.MIN_ROUNDS}, {self.MAX_ROUNDS}], got {rounds}"
            )
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a non-empty password with a fresh salt.

        Raises:
            TypeError: password is not a ``str``
            ValueError: password is empty
        """
        if not isinstance(password, str):
            raise TypeError(f"password must be str, not {type(password).__name__}")
        if not password:
            raise ValueError("password is empty")

        digest = bcrypt.hashpw(_bcrypt_input(password), bcrypt.gensalt(rounds=self.rounds))
        return digest.decode("ascii")

    def verify(self, password: str, hashed_password: str) -> bool:
        """True when ``password`` matches ``hashed_password``; False for empty or malformed input."""
        if not password or not hashed_password:
            return False
        try:
            return bcrypt.checkpw(_bcrypt_input(password), hashed_password.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password hash is not a valid bcrypt hash")
            return False
