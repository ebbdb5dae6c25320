# ==============================================================================
# PAYLOAD VALIDATION - Tagged Results
# ==============================================================================
# Validate raw request payloads against a schema without raising
# ==============================================================================

"""
Payload validation returning ``Ok`` or ``Err`` instead of raising.

Rejecting a bad payload is routine, so callers branch on ``is_ok``
rather than catching exceptions::

    result = validate_payload(UserSignup, payload)
    if not result.is_ok:
        return result.errors
    signup = result.value
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Sequence, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

S = TypeVar("S", bound=BaseModel)


@dataclass(frozen=True)
class FieldError:
    """One violated rule, located by its wire-format field name."""

    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class Ok(Generic[S]):
    value: S
    is_ok: bool = True


@dataclass(frozen=True)
class Err:
    errors: List[FieldError] = field(default_factory=list)
    is_ok: bool = False

    def to_list(self) -> List[Dict[str, str]]:
        return [error.to_dict() for error in self.errors]


ValidationResult = Union[Ok[S], Err]


def _location(loc: Sequence[Union[str, int]]) -> str:
    return ".".join(str(part) for part in loc) or "body"


def validate_payload(schema: Type[S], payload: Any) -> ValidationResult[S]:
    """
    Validate ``payload`` against ``schema``.

    Args:
        schema: Pydantic model describing the payload
        payload: Decoded JSON body (any type)

    Returns:
        ``Ok(model)`` on success, otherwise ``Err`` listing every
        violated field
    """
    try:
        value = schema.model_validate(payload)
    except PydanticValidationError as exc:
        return Err([
            FieldError(field=_location(error["loc"]), message=error["msg"])
            for error in exc.errors()
        ])
    return Ok(value)
