# ==============================================================================
# PURCHASE SCHEMAS
# ==============================================================================
# Response schemas for a user's purchases
# ==============================================================================

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import ConfigDict, Field

from coursestore.schemas.base import BaseSchema
from coursestore.schemas.course import CourseResponse


class PurchaseResponse(BaseSchema):
    """A purchase record linking a user to a course."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(
        ...,
        description="Purchase unique identifier",
    )
    user_id: Optional[Any] = None
    course_id: Optional[Any] = None


class PurchasesResponse(BaseSchema):
    """A user's purchases and the courses they refer to."""

    purchases: List[PurchaseResponse] = Field(default_factory=list)
    courses_data: List[CourseResponse] = Field(default_factory=list)
