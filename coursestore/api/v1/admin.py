# ==============================================================================
# ADMIN ENDPOINTS - Admin Accounts & Course Management
# ==============================================================================
# Signup, signin and course create/update/list for admins
# ==============================================================================

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body

from coursestore.api.dependencies import (
    AdminAccountServiceDep,
    AdminIdentity,
    CourseServiceDep,
    SettingsDep,
)
from coursestore.api.errors import error_boundary
from coursestore.core.constants import SuccessMessages
from coursestore.core.exceptions import ValidationError
from coursestore.schemas.account import (
    AdminSignin,
    AdminSignup,
    SignupResponse,
    TokenResponse,
)
from coursestore.schemas.course import (
    CourseCreate,
    CourseCreatedResponse,
    CourseListResponse,
    CourseResponse,
    CourseUpdate,
    CourseUpdatedResponse,
)
from coursestore.schemas.validation import validate_payload
from coursestore.services.course_service import is_plain_field

router = APIRouter(prefix="/admin", tags=["Admin"])


# ==============================================================================
# ACCOUNTS
# ==============================================================================

@router.post(
    "/signup",
    response_model=SignupResponse,
    summary="Admin signup",
    description="Create an admin account and receive an admin bearer token.",
)
async def signup(
    service: AdminAccountServiceDep,
    payload: Any = Body(None),
) -> SignupResponse:
    """Register a new admin."""
    result = validate_payload(AdminSignup, payload)
    if not result.is_ok:
        raise ValidationError()

    with error_boundary("Signup"):
        token = await service.signup(result.value)
    return SignupResponse(message=SuccessMessages.SIGNUP, token=token)


@router.post(
    "/signin",
    response_model=TokenResponse,
    summary="Admin signin",
    description="Exchange admin credentials for an admin bearer token.",
)
async def signin(
    service: AdminAccountServiceDep,
    payload: Any = Body(None),
) -> TokenResponse:
    """Authenticate an admin."""
    result = validate_payload(AdminSignin, payload)
    if not result.is_ok:
        raise ValidationError()

    credentials = result.value
    with error_boundary("Signin"):
        token = await service.signin(credentials.email, credentials.password)
    return TokenResponse(token=token)


# ==============================================================================
# COURSES
# ==============================================================================

@router.post(
    "/course",
    response_model=CourseCreatedResponse,
    summary="Create course",
    description="Create a course owned by the calling admin.",
)
async def create_course(
    identity: AdminIdentity,
    service: CourseServiceDep,
    payload: Any = Body(None),
) -> CourseCreatedResponse:
    """Create a course."""
    result = validate_payload(CourseCreate, payload)
    if not result.is_ok:
        raise ValidationError()

    with error_boundary("Create course"):
        course_id = await service.create(identity.subject_id, result.value)
    return CourseCreatedResponse(
        message=SuccessMessages.COURSE_CREATED,
        course_id=course_id,
    )


@router.put(
    "/course",
    response_model=CourseUpdatedResponse,
    summary="Update course",
    description=(
        "Update a course owned by the calling admin. Courses owned by "
        "other admins answer 404 like missing ones."
    ),
)
async def update_course(
    identity: AdminIdentity,
    service: CourseServiceDep,
    settings: SettingsDep,
    payload: Any = Body(None),
) -> CourseUpdatedResponse:
    """Update a course."""
    if not isinstance(payload, dict):
        raise ValidationError()

    changes = dict(payload)
    course_id = changes.pop("courseId", None)

    if settings.STRICT_COURSE_UPDATES:
        result = validate_payload(CourseUpdate, changes)
        if not result.is_ok:
            raise ValidationError(errors=result.to_list())
        changes = result.value.to_changes()
    elif any(not is_plain_field(key) for key in changes):
        raise ValidationError()

    with error_boundary("Update course"):
        course = await service.update(identity.subject_id, course_id, changes)
    return CourseUpdatedResponse(
        message=SuccessMessages.COURSE_UPDATED,
        course=CourseResponse.model_validate(course),
    )


@router.get(
    "/course/bulk",
    response_model=CourseListResponse,
    summary="List own courses",
    description="All courses created by the calling admin.",
)
async def list_courses(
    identity: AdminIdentity,
    service: CourseServiceDep,
) -> CourseListResponse:
    """List the admin's courses."""
    with error_boundary("Get bulk courses"):
        courses = await service.list_for_creator(identity.subject_id)
    return CourseListResponse(
        courses=[CourseResponse.model_validate(course) for course in courses],
    )
