# ==============================================================================
# SETTINGS CONFIGURATION - Environment Management
# ==============================================================================
# Pydantic Settings for type-safe environment variable management
# Supports: Development, Staging, Production environments
# ==============================================================================

from __future__ import annotations

import warnings
from enum import Enum
from functools import lru_cache
from typing import List

from pydantic import Field, computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_ADMIN_SECRET = "change-me-admin-signing-secret-0000000000"
DEFAULT_USER_SECRET = "change-me-user-signing-secret-00000000000"


class Environment(str, Enum):
    """Application environment types."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Application Settings Configuration.

    Manages all environment variables with type validation and defaults.
    Uses Pydantic BaseSettings for automatic .env file loading and
    environment variable parsing.

    The two signing secrets partition bearer tokens into the admin and
    user namespaces. They are read once at startup and injected into the
    token issuers; nothing mutates them afterwards.

    Example:
        >>> from coursestore.core.settings import settings
        >>> print(settings.APP_NAME)
        'Course Store'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # --------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # --------------------------------------------------------------------------
    APP_NAME: str = Field(
        default="Course Store",
        description="Application display name"
    )
    APP_VERSION: str = Field(
        default="1.0.0",
        description="Application semantic version"
    )
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (API docs, verbose logs)"
    )
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Current deployment environment"
    )

    # --------------------------------------------------------------------------
    # API CONFIGURATION
    # --------------------------------------------------------------------------
    API_V1_PREFIX: str = Field(
        default="/api/v1",
        description="API version 1 route prefix"
    )
    API_TITLE: str = Field(
        default="Course Store API",
        description="OpenAPI documentation title"
    )
    API_DESCRIPTION: str = Field(
        default="Admin and user accounts, course management and purchases",
        description="OpenAPI documentation description"
    )

    # --------------------------------------------------------------------------
    # DATABASE CONFIGURATION
    # --------------------------------------------------------------------------
    MONGODB_URL: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URI"
    )
    MONGODB_DB: str = Field(
        default="course_store",
        description="MongoDB database name"
    )
    DB_POOL_SIZE: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Database connection pool size"
    )
    DB_POOL_TIMEOUT: int = Field(
        default=30,
        ge=1,
        le=300,
        description="Idle connection timeout in seconds"
    )

    # --------------------------------------------------------------------------
    # SECURITY SETTINGS
    # --------------------------------------------------------------------------
    JWT_ADMIN_SECRET: str = Field(
        default=DEFAULT_ADMIN_SECRET,
        min_length=32,
        description="Signing secret for admin bearer tokens (min 32 chars)"
    )
    JWT_USER_SECRET: str = Field(
        default=DEFAULT_USER_SECRET,
        min_length=32,
        description="Signing secret for user bearer tokens (min 32 chars)"
    )
    JWT_ALGORITHM: str = Field(
        default="HS256",
        description="JWT signing algorithm"
    )
    BCRYPT_ROUNDS: int = Field(
        default=10,
        ge=4,
        le=31,
        description="bcrypt work factor"
    )

    # --------------------------------------------------------------------------
    # COURSE POLICY
    # --------------------------------------------------------------------------
    STRICT_COURSE_UPDATES: bool = Field(
        default=False,
        description="Validate course update payloads against the course schema"
    )

    # --------------------------------------------------------------------------
    # CORS SETTINGS
    # --------------------------------------------------------------------------
    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins, comma-separated"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(
        default=True,
        description="Allow credentials in CORS requests"
    )

    # --------------------------------------------------------------------------
    # LOGGING CONFIGURATION
    # --------------------------------------------------------------------------
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    LOG_FORMAT: str = Field(
        default="text",
        pattern="^(text|json)$",
        description="Log format (json, text)"
    )

    # --------------------------------------------------------------------------
    # COMPUTED PROPERTIES
    # --------------------------------------------------------------------------
    @computed_field
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == Environment.PRODUCTION

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from the comma-separated setting."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    # --------------------------------------------------------------------------
    # VALIDATORS
    # --------------------------------------------------------------------------
    @field_validator("JWT_ADMIN_SECRET", "JWT_USER_SECRET")
    @classmethod
    def warn_default_secret(cls, v: str) -> str:
        """Warn when a signing secret still has its shipped default."""
        if v in (DEFAULT_ADMIN_SECRET, DEFAULT_USER_SECRET):
            warnings.warn(
                "Using a default JWT signing secret. Set JWT_ADMIN_SECRET and "
                "JWT_USER_SECRET for production!",
                UserWarning,
            )
        return v

    @model_validator(mode="after")
    def check_secrets_differ(self) -> "Settings":
        """Admin and user tokens must not be interchangeable."""
        if self.JWT_ADMIN_SECRET == self.JWT_USER_SECRET:
            raise ValueError(
                "JWT_ADMIN_SECRET and JWT_USER_SECRET must be different"
            )
        return self


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Uses lru_cache to ensure settings are only loaded once,
    providing a singleton-like behavior for the settings object.

    Returns:
        Settings: Cached settings instance
    """
    return Settings()


# Module-level settings instance for convenient imports
settings = get_settings()
