# ==============================================================================
# USER ENDPOINTS - User Accounts & Purchases
# ==============================================================================
# Signup, signin and purchase lookup for users
# ==============================================================================

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body

from coursestore.api.dependencies import (
    PurchaseServiceDep,
    UserAccountServiceDep,
    UserIdentity,
)
from coursestore.api.errors import error_boundary
from coursestore.core.constants import ErrorMessages, SuccessMessages
from coursestore.core.exceptions import ValidationError
from coursestore.schemas.account import (
    SignupResponse,
    TokenResponse,
    UserSignin,
    UserSignup,
)
from coursestore.schemas.course import CourseResponse
from coursestore.schemas.purchase import PurchaseResponse, PurchasesResponse
from coursestore.schemas.validation import validate_payload

router = APIRouter(prefix="/user", tags=["User"])


@router.post(
    "/signup",
    response_model=SignupResponse,
    summary="User signup",
    description="Create a user account and receive a user bearer token.",
)
async def signup(
    service: UserAccountServiceDep,
    payload: Any = Body(None),
) -> SignupResponse:
    """Register a new user. Field errors are reported back."""
    result = validate_payload(UserSignup, payload)
    if not result.is_ok:
        raise ValidationError(errors=result.to_list())

    with error_boundary("Signup", ErrorMessages.SIGNUP_FAILED):
        token = await service.signup(result.value)
    return SignupResponse(message=SuccessMessages.SIGNUP, token=token)


@router.post(
    "/signin",
    response_model=TokenResponse,
    summary="User signin",
    description="Exchange user credentials for a user bearer token.",
)
async def signin(
    service: UserAccountServiceDep,
    payload: Any = Body(None),
) -> TokenResponse:
    """Authenticate a user."""
    result = validate_payload(UserSignin, payload)
    if not result.is_ok:
        raise ValidationError(errors=result.to_list())

    credentials = result.value
    with error_boundary("Signin", ErrorMessages.SIGNIN_FAILED):
        token = await service.signin(credentials.email, credentials.password)
    return TokenResponse(token=token)


@router.get(
    "/purchases",
    response_model=PurchasesResponse,
    summary="List purchases",
    description="The calling user's purchases and the purchased courses.",
)
async def purchases(
    identity: UserIdentity,
    service: PurchaseServiceDep,
) -> PurchasesResponse:
    """List the user's purchases."""
    with error_boundary("Purchases", ErrorMessages.PURCHASES_FAILED):
        purchase_records, courses = await service.list_for_user(identity.subject_id)
    return PurchasesResponse(
        purchases=[PurchaseResponse.model_validate(p) for p in purchase_records],
        courses_data=[CourseResponse.model_validate(c) for c in courses],
    )
