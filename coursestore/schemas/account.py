# ==============================================================================
# ACCOUNT SCHEMAS - Signup & Signin
# ==============================================================================
# Request/Response schemas for admin and user accounts
# ==============================================================================

from __future__ import annotations

import re

from pydantic import EmailStr, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from coursestore.core.constants import ErrorMessages, SecurityConstants
from coursestore.schemas.base import BaseSchema


_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(
    "[" + re.escape(SecurityConstants.PASSWORD_SPECIAL_CHARACTERS) + "]"
)
_EMAIL = TypeAdapter(EmailStr)


def check_email_syntax(email: str) -> str:
    """
    Check ``email`` is a valid address and return it unchanged.

    ``EmailStr`` normalizes the domain; accounts are stored and looked up
    by the address exactly as submitted.

    Raises:
        ValueError: If the address does not parse
    """
    try:
        _EMAIL.validate_python(email)
    except PydanticValidationError as exc:
        raise ValueError(exc.errors()[0]["msg"]) from None
    return email


def check_password_strength(password: str) -> str:
    """
    Require one ASCII uppercase letter, one ASCII lowercase letter, one
    digit and one special character.

    Raises:
        ValueError: If any character class is missing
    """
    if not (
        _UPPERCASE.search(password)
        and _LOWERCASE.search(password)
        and _DIGIT.search(password)
        and _SPECIAL.search(password)
    ):
        raise ValueError(ErrorMessages.PASSWORD_POLICY)
    return password


# ==============================================================================
# SIGNUP
# ==============================================================================

class AccountSignup(BaseSchema):
    """Fields every signup carries, whatever the role."""

    email: str = Field(
        ...,
        description="Account email address, stored as submitted",
        examples=["admin@example.com"],
    )
    password: str = Field(
        ...,
        min_length=SecurityConstants.MIN_PASSWORD_LENGTH,
        description="Plaintext password (never stored)",
    )
    first_name: str
    last_name: str

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return check_email_syntax(v)

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, v: str) -> str:
        """Ensure password meets the character-class policy."""
        return check_password_strength(v)


class AdminSignup(AccountSignup):
    """
    Admin signup.

    Names only need to be non-empty and the password has no upper bound.
    """

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)


class UserSignup(AccountSignup):
    """User signup: 8–50 character password, 3–50 character names."""

    password: str = Field(
        ...,
        min_length=SecurityConstants.MIN_PASSWORD_LENGTH,
        max_length=SecurityConstants.MAX_USER_PASSWORD_LENGTH,
    )
    first_name: str = Field(
        ...,
        min_length=SecurityConstants.MIN_USER_NAME_LENGTH,
        max_length=SecurityConstants.MAX_USER_NAME_LENGTH,
    )
    last_name: str = Field(
        ...,
        min_length=SecurityConstants.MIN_USER_NAME_LENGTH,
        max_length=SecurityConstants.MAX_USER_NAME_LENGTH,
    )


# ==============================================================================
# SIGNIN
# ==============================================================================

class AdminSignin(BaseSchema):
    """Admin signin: both fields must be strings, nothing more."""

    email: str
    password: str


class UserSignin(BaseSchema):
    """User signin: held to the same policy as user signup."""

    email: str
    password: str = Field(
        ...,
        min_length=SecurityConstants.MIN_PASSWORD_LENGTH,
        max_length=SecurityConstants.MAX_USER_PASSWORD_LENGTH,
    )

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, v: str) -> str:
        return check_password_strength(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return check_email_syntax(v)


# ==============================================================================
# RESPONSES
# ==============================================================================

class SignupResponse(BaseSchema):
    """Body returned by a successful signup."""

    message: str
    token: str = Field(
        ...,
        description="Bearer token for the new account",
    )


class TokenResponse(BaseSchema):
    """Body returned by a successful signin."""

    token: str = Field(
        ...,
        description="Bearer token",
    )
