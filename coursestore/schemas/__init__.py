# ==============================================================================
# SCHEMAS PACKAGE
# ==============================================================================

"""
Pydantic request/response schemas and payload validation.
"""

from coursestore.schemas.base import BaseSchema, HealthResponse, MessageResponse
from coursestore.schemas.account import (
    AccountSignup,
    AdminSignin,
    AdminSignup,
    SignupResponse,
    TokenResponse,
    UserSignin,
    UserSignup,
)
from coursestore.schemas.course import (
    CourseCreate,
    CourseCreatedResponse,
    CourseListResponse,
    CourseResponse,
    CourseUpdate,
    CourseUpdatedResponse,
)
from coursestore.schemas.purchase import PurchaseResponse, PurchasesResponse
from coursestore.schemas.validation import (
    Err,
    FieldError,
    Ok,
    ValidationResult,
    validate_payload,
)

__all__ = [
    "BaseSchema",
    "HealthResponse",
    "MessageResponse",
    "AccountSignup",
    "AdminSignin",
    "AdminSignup",
    "SignupResponse",
    "TokenResponse",
    "UserSignin",
    "UserSignup",
    "CourseCreate",
    "CourseCreatedResponse",
    "CourseListResponse",
    "CourseResponse",
    "CourseUpdate",
    "CourseUpdatedResponse",
    "PurchaseResponse",
    "PurchasesResponse",
    "Err",
    "FieldError",
    "Ok",
    "ValidationResult",
    "validate_payload",
]
