# ==============================================================================
# APPLICATION CONSTANTS - Centralized Configuration Values
# ==============================================================================
# Immutable constants used throughout the application
# ==============================================================================

from __future__ import annotations

from typing import Final


# ==============================================================================
# DATABASE CONSTANTS
# ==============================================================================

class DatabaseConstants:
    """Collection names and query limits."""

    ADMINS_COLLECTION: Final[str] = "admins"
    USERS_COLLECTION: Final[str] = "users"
    COURSES_COLLECTION: Final[str] = "courses"
    PURCHASES_COLLECTION: Final[str] = "purchases"

    # Collections holding accounts, each with a unique email index
    ACCOUNT_COLLECTIONS: Final[tuple] = (ADMINS_COLLECTION, USERS_COLLECTION)

    DEFAULT_QUERY_LIMIT: Final[int] = 1000


# ==============================================================================
# SECURITY CONSTANTS
# ==============================================================================

class SecurityConstants:
    """Password policy and token settings."""

    MIN_PASSWORD_LENGTH: Final[int] = 8
    MAX_USER_PASSWORD_LENGTH: Final[int] = 50
    PASSWORD_SPECIAL_CHARACTERS: Final[str] = "!@#$%^&*()_+{}[]:;<>,.?~\\/-"

    MIN_USER_NAME_LENGTH: Final[int] = 3
    MAX_USER_NAME_LENGTH: Final[int] = 50

    AUTH_HEADER_PREFIX: Final[str] = "Bearer"
    SUBJECT_CLAIM: Final[str] = "sub"


# ==============================================================================
# MESSAGES
# ==============================================================================

class ErrorMessages:
    """Client-facing error messages."""

    INCORRECT_INPUTS: Final[str] = "Incorrect inputs"
    INCORRECT_CREDENTIALS: Final[str] = "Incorrect credentials"
    NOT_SIGNED_IN: Final[str] = "You are not signed in"
    COURSE_NOT_FOUND: Final[str] = "Course not found"
    INTERNAL_ERROR: Final[str] = "Internal server error"
    SIGNUP_FAILED: Final[str] = "Error while signing up"
    SIGNIN_FAILED: Final[str] = "Error while signing in"
    PURCHASES_FAILED: Final[str] = "Error while getting purchases"

    PASSWORD_POLICY: Final[str] = (
        "Password must be at least 8 characters long and include one "
        "uppercase letter, one lowercase letter, one number, and one "
        "special character."
    )


class SuccessMessages:
    """Client-facing success messages."""

    SIGNUP: Final[str] = "Signup succeeded"
    COURSE_CREATED: Final[str] = "Course created"
    COURSE_UPDATED: Final[str] = "Course updated successfully"
