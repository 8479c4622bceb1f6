"""
Environment configuration for the community management backend.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True)
class TokenSettings:
    """
    Lifetimes and signing secret consumed by the token manager and the
    authentication service.

    Example:
        >>> token_settings = TokenSettings(
        ...     secret=settings.TOKEN_SECRET,
        ...     jwt_lifetime=timedelta(days=1),
        ... )
    """
    secret: str
    algorithm: str = "HS512"
    jwt_lifetime: timedelta = timedelta(days=1)
    reset_token_lifetime: timedelta = timedelta(days=1)
    email_token_lifetime: timedelta = timedelta(days=1)

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.jwt_lifetime <= timedelta(0):
            raise ValueError("jwt_lifetime must be positive")
        if self.reset_token_lifetime < timedelta(0):
            raise ValueError("reset_token_lifetime cannot be negative")
        if self.email_token_lifetime < timedelta(0):
            raise ValueError("email_token_lifetime cannot be negative")


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    # Application configuration
    APP_NAME: str = "MyHome"

    # Database configuration - support both individual fields and DATABASE_URL
    DATABASE_URL: Optional[str] = None
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "myhome"
    DB_POOL_SIZE: int = 20
    DB_POOL_OVERFLOW: int = 10
    DB_ECHO: bool = False

    # Security configuration
    TOKEN_SECRET: str = ""
    TOKEN_ALGORITHM: str = "HS512"
    TOKEN_EXPIRATION_TIME: timedelta = timedelta(days=1)
    TOKENS_RESET_EXPIRATION: timedelta = timedelta(days=1)
    TOKENS_EMAIL_EXPIRATION: timedelta = timedelta(days=1)
    PASSWORD_BCRYPT_ROUNDS: int = 12

    # Email configuration
    MAIL_DEV_MODE: bool = True
    SMTP_HOST: str = "localhost"
    SMTP_PORT: int = 587
    SMTP_USERNAME: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    SMTP_USE_TLS: bool = True
    MAIL_FROM: Optional[str] = Field(default=None, alias="FROM_EMAIL")
    MAIL_LINK_BASE_URL: str = "http://localhost:8080"

    # House member documents
    FILES_COMPRESSION_BORDER_SIZE_KBYTES: int = 99
    FILES_MAX_SIZE_KBYTES: int = 1024
    FILES_COMPRESSED_IMAGE_QUALITY: float = 0.5

    # Monitoring and logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"
    LOG_SQL_QUERIES: bool = False

    @field_validator("TOKEN_ALGORITHM")
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        """Only HMAC algorithms are supported for session tokens"""
        if v not in ("HS256", "HS384", "HS512"):
            raise ValueError(f"Unsupported token algorithm: {v}")
        return v

    @field_validator("FILES_COMPRESSED_IMAGE_QUALITY")
    @classmethod
    def validate_quality(cls, v: float) -> float:
        if not 0 < v <= 1:
            raise ValueError("FILES_COMPRESSED_IMAGE_QUALITY must be in (0, 1]")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return v.upper()

    def get_database_url(self) -> str:
        """Construct database URL from components or use provided URL"""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        # Construct from individual components
        return (
            f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def token_settings(self) -> TokenSettings:
        """Token lifetimes and secret as an immutable struct."""
        return TokenSettings(
            secret=self.TOKEN_SECRET,
            algorithm=self.TOKEN_ALGORITHM,
            jwt_lifetime=self.TOKEN_EXPIRATION_TIME,
            reset_token_lifetime=self.TOKENS_RESET_EXPIRATION,
            email_token_lifetime=self.TOKENS_EMAIL_EXPIRATION,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
