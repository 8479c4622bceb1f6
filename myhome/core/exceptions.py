"""
Custom Exceptions for the MyHome Application

Only truly exceptional security conditions and infrastructure failures
are raised; services report not-found, conflict and invalid-token
outcomes through ``None``/``False`` results instead.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Authentication
    USER_NOT_FOUND = "USER_NOT_FOUND"
    CREDENTIALS_INCORRECT = "CREDENTIALS_INCORRECT"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    TOKEN_INVALID = "TOKEN_INVALID"
    WEAK_KEY = "WEAK_KEY"

    # Database errors
    DATABASE_ERROR = "DATABASE_ERROR"
    TRANSACTION_FAILED = "TRANSACTION_FAILED"

    # External service errors
    EMAIL_SERVICE_ERROR = "EMAIL_SERVICE_ERROR"


class MyHomeError(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# Authentication Exceptions
# ========================================

class AuthenticationError(MyHomeError):
    """Base class for login failures"""

    def __init__(
        self,
        message: str = "Authentication failed",
        error_code: ErrorCode = ErrorCode.CREDENTIALS_INCORRECT,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 401
    ):
        super().__init__(message, error_code, details, status_code)


class UserNotFoundError(AuthenticationError):
    """Raised when no user is registered under the login email"""

    def __init__(self, email: Optional[str] = None):
        message = "User not found"
        if email:
            message += f" (email: {email})"
        super().__init__(message, ErrorCode.USER_NOT_FOUND, {"email": email}, 404)
        self.email = email


class CredentialsIncorrectError(AuthenticationError):
    """Raised when the password does not match the stored hash"""

    def __init__(self, user_id: Optional[str] = None):
        message = "Credentials are incorrect"
        if user_id:
            message += f" for user {user_id}"
        super().__init__(message, ErrorCode.CREDENTIALS_INCORRECT, {"user_id": user_id}, 401)
        self.user_id = user_id


# ========================================
# Token Signing Exceptions
# ========================================

class TokenError(MyHomeError):
    """Base class for signed session token failures"""

    def __init__(
        self,
        message: str = "Invalid token",
        error_code: ErrorCode = ErrorCode.TOKEN_INVALID,
        status_code: int = 401
    ):
        super().__init__(message, error_code, None, status_code)


class InvalidTokenError(TokenError):
    """Raised when a token is malformed or its signature does not verify"""

    def __init__(self, message: str = "Invalid or malformed token"):
        super().__init__(message, ErrorCode.TOKEN_INVALID, 401)


class ExpiredTokenError(TokenError):
    """Raised when a token is past its expiration"""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, ErrorCode.TOKEN_EXPIRED, 401)


class WeakKeyError(TokenError):
    """Raised when the signing secret is shorter than the algorithm requires"""

    def __init__(self, algorithm: str, required_bytes: int, actual_bytes: int):
        super().__init__(
            f"Secret of {actual_bytes} bytes is too weak for {algorithm}; "
            f"at least {required_bytes} bytes are required",
            ErrorCode.WEAK_KEY,
            500,
        )
        self.algorithm = algorithm
        self.required_bytes = required_bytes
        self.actual_bytes = actual_bytes


# ========================================
# Infrastructure Exceptions
# ========================================

class RepositoryError(MyHomeError):
    """Raised when a repository operation fails at the database level"""

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message, ErrorCode.DATABASE_ERROR, None, 500)


class TransactionError(MyHomeError):
    """Raised when a database transaction fails to commit."""

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(
            message,
            ErrorCode.TRANSACTION_FAILED,
            {"error_type": type(original_error).__name__},
            500,
        )
        self.original_error = original_error


class MailSendError(MyHomeError):
    """Raised inside the SMTP notifier when a message cannot be delivered"""

    def __init__(self, message: str = "Failed to send email"):
        super().__init__(message, ErrorCode.EMAIL_SERVICE_ERROR, None, 502)
