# ==============================================================================
# CUSTOM EXCEPTIONS - Application Error Hierarchy
# ==============================================================================
# Structured exception classes for consistent error handling
# Each exception maps to the HTTP status code the API answers with
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, List, Optional


class AppException(Exception):
    """
    Base exception for all application errors.

    Provides a consistent interface for error handling with:
    - Error code for programmatic identification
    - HTTP status code mapping
    - Client-facing message and optional field errors

    Attributes:
        message: Human-readable error description (sent to the client)
        error_code: Machine-readable error identifier (logged only)
        status_code: HTTP status code to return
        errors: Optional list of field-level errors sent to the client

    Example:
        >>> raise AppException(
        ...     message="Something went wrong",
        ...     error_code="INTERNAL_ERROR",
        ...     status_code=500
        ... )
    """

    def __init__(
        self,
        message: str = "Internal server error",
        error_code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.errors = errors
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to the JSON error body.

        Returns:
            ``{"message": ...}`` plus ``errors`` when field errors exist
        """
        body: Dict[str, Any] = {"message": self.message}
        if self.errors is not None:
            body["errors"] = self.errors
        return body

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}', "
            f"status_code={self.status_code})"
        )


# ==============================================================================
# DATABASE EXCEPTIONS
# ==============================================================================

class DatabaseError(AppException):
    """
    Raised when the document store cannot serve a request.

    The message is opaque on purpose; connection details go to the log.
    """

    def __init__(
        self,
        message: str = "Internal server error",
    ) -> None:
        super().__init__(
            message=message,
            error_code="DATABASE_ERROR",
            status_code=500,
        )


class InternalError(AppException):
    """
    Opaque 500 raised in place of an unexpected exception.

    Routes use it to answer with their own message while the original
    exception is chained and logged.
    """

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(
            message=message,
            error_code="INTERNAL_ERROR",
            status_code=500,
        )


# ==============================================================================
# RESOURCE EXCEPTIONS
# ==============================================================================

class NotFoundError(AppException):
    """
    Raised when a requested resource does not exist or is not owned by
    the caller. Both cases answer identically.

    Maps to HTTP 404 Not Found.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="NOT_FOUND",
            status_code=404,
        )
        self.resource_type = resource_type


class AlreadyExistsError(AppException):
    """
    Raised when attempting to create an account whose email is taken.

    Maps to HTTP 400 Bad Request.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="ALREADY_EXISTS",
            status_code=400,
        )
        self.resource_type = resource_type


# ==============================================================================
# VALIDATION EXCEPTIONS
# ==============================================================================

class ValidationError(AppException):
    """
    Raised at the HTTP boundary when a payload failed validation.

    Maps to HTTP 400 Bad Request. ``errors`` is only included in the
    body for routes that expose field errors.
    """

    def __init__(
        self,
        message: str = "Incorrect inputs",
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=400,
            errors=errors,
        )


# ==============================================================================
# AUTHENTICATION & AUTHORIZATION EXCEPTIONS
# ==============================================================================

class AuthenticationError(AppException):
    """
    Raised when signin credentials do not match.

    Maps to HTTP 403. The message never says which half was wrong.
    """

    def __init__(
        self,
        message: str = "Incorrect credentials",
    ) -> None:
        super().__init__(
            message=message,
            error_code="AUTHENTICATION_ERROR",
            status_code=403,
        )


class AuthorizationError(AppException):
    """
    Raised by the role gate when no acceptable bearer token was presented.

    Maps to HTTP 403 Forbidden.
    """

    def __init__(
        self,
        message: str = "You are not signed in",
    ) -> None:
        super().__init__(
            message=message,
            error_code="AUTHORIZATION_ERROR",
            status_code=403,
        )


class InvalidTokenError(AuthorizationError):
    """
    Raised when a bearer token is malformed, unsigned by the expected
    secret, or carries no subject.
    """

    def __init__(
        self,
        message: str = "You are not signed in",
        reason: Optional[str] = None,
    ) -> None:
        super().__init__(message=message)
        self.error_code = "INVALID_TOKEN"
        self.reason = reason
