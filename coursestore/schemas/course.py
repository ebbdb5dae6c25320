# ==============================================================================
# COURSE SCHEMAS - Course Catalogue
# ==============================================================================
# Request/Response schemas for courses
# ==============================================================================

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Union

from pydantic import AnyUrl, ConfigDict, Field, StrictFloat, StrictInt, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from coursestore.schemas.base import BaseSchema


Price = Union[StrictInt, StrictFloat]
_URL = TypeAdapter(AnyUrl)


def _finite(value: Optional[float]) -> Optional[float]:
    if value is not None and not math.isfinite(value):
        raise ValueError("Price must be a finite number")
    return value


def _parses_as_url(value: Optional[str]) -> Optional[str]:
    # Checked with AnyUrl, stored as submitted
    if value is not None:
        try:
            _URL.validate_python(value)
        except PydanticValidationError as exc:
            raise ValueError(exc.errors()[0]["msg"]) from None
    return value


class CourseCreate(BaseSchema):
    """Schema for creating a course."""

    title: str = Field(
        ...,
        description="Course title",
    )
    description: str = Field(
        ...,
        description="Course description",
    )
    image_url: str = Field(
        ...,
        description="Absolute URL of the course image",
        examples=["https://cdn.example.com/course.png"],
    )
    price: Price = Field(
        ...,
        description="Course price",
    )

    @field_validator("price")
    @classmethod
    def check_price(cls, v: float) -> float:
        return _finite(v)

    @field_validator("image_url")
    @classmethod
    def check_image_url(cls, v: str) -> str:
        return _parses_as_url(v)

    def to_document(self, creator_id: str) -> Dict[str, Any]:
        """Stored form, with the creating admin's id attached."""
        document = self.model_dump(by_alias=True)
        document["creatorId"] = creator_id
        return document


class CourseUpdate(BaseSchema):
    """
    Schema for updating a course when strict updates are enabled.

    Only the catalogue fields may change; anything else is rejected.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    price: Optional[Price] = None

    @field_validator("price")
    @classmethod
    def check_price(cls, v: Optional[float]) -> Optional[float]:
        return _finite(v)

    @field_validator("image_url")
    @classmethod
    def check_image_url(cls, v: Optional[str]) -> Optional[str]:
        return _parses_as_url(v)

    def to_changes(self) -> Dict[str, Any]:
        """Stored form of the fields that were actually supplied."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class CourseResponse(BaseSchema):
    """
    A stored course.

    Extra fields written by permissive updates are passed through.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(
        ...,
        description="Course unique identifier",
    )
    title: Optional[Any] = None
    description: Optional[Any] = None
    image_url: Optional[Any] = None
    price: Optional[Any] = None
    creator_id: Optional[Any] = Field(
        None,
        description="Id of the admin who created the course",
    )


class CourseCreatedResponse(BaseSchema):
    """Body returned after creating a course."""

    message: str
    course_id: str


class CourseUpdatedResponse(BaseSchema):
    """Body returned after updating a course."""

    message: str
    course: CourseResponse


class CourseListResponse(BaseSchema):
    """An admin's own courses."""

    courses: List[CourseResponse] = Field(default_factory=list)
