# ==============================================================================
# CORE PACKAGE INITIALIZATION
# ==============================================================================
# Core utilities: Settings, Security, Exceptions, Constants
# ==============================================================================

"""
Core Module
===========

Contains core utilities and configurations for the application:
- settings: Environment configuration management
- security: Password hashing and per-role session tokens
- exceptions: Custom exception classes
- constants: Application-wide constants
"""

from coursestore.core.settings import settings, get_settings
from coursestore.core.exceptions import (
    AppException,
    AlreadyExistsError,
    AuthenticationError,
    AuthorizationError,
    DatabaseError,
    InternalError,
    InvalidTokenError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "settings",
    "get_settings",
    "AppException",
    "AlreadyExistsError",
    "AuthenticationError",
    "AuthorizationError",
    "DatabaseError",
    "InternalError",
    "InvalidTokenError",
    "NotFoundError",
    "ValidationError",
]
