# ==============================================================================
# COURSE SERVICE - Admin Course Management
# ==============================================================================
# Create, update and list courses owned by the calling admin
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, List

from coursestore.core.constants import DatabaseConstants, ErrorMessages
from coursestore.core.exceptions import NotFoundError
from coursestore.database.adapters.base_adapter import BaseDatabaseAdapter
from coursestore.schemas.course import CourseCreate
from coursestore.services.base_service import BaseService

logger = logging.getLogger(__name__)

# Fields a course update never rewrites
PROTECTED_FIELDS = frozenset({"id", "_id", "creatorId", "courseId"})


def is_plain_field(key: str) -> bool:
    """Whether ``key`` names a top-level field rather than an operator or path."""
    return bool(key) and not key.startswith("$") and "." not in key


class CourseService(BaseService):
    """Course operations scoped to the admin who created each course."""

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        super().__init__(adapter, DatabaseConstants.COURSES_COLLECTION)

    async def create(self, creator_id: str, schema: CourseCreate) -> str:
        """
        Store a new course owned by ``creator_id``.

        Returns:
            The new course id
        """
        course = await self._adapter.create(
            self._collection_name,
            schema.to_document(creator_id),
        )
        logger.info(f"Course {course['id']} created by admin {creator_id}")
        return course["id"]

    async def update(
        self,
        creator_id: str,
        course_id: Any,
        changes: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Apply ``changes`` to a course the admin owns.

        Ownership is part of the lookup filter, so a course that exists
        but belongs to someone else is indistinguishable from a missing
        one.

        Raises:
            NotFoundError: If no course with that id is owned by the admin
        """
        changes = {k: v for k, v in changes.items() if k not in PROTECTED_FIELDS}

        course = None
        # Operator objects are never accepted as an id
        if isinstance(course_id, str):
            course = await self._adapter.find_one_and_update(
                self._collection_name,
                {"id": course_id, "creatorId": self._adapter.reference(creator_id)},
                changes,
            )
        if course is None:
            raise NotFoundError(
                message=ErrorMessages.COURSE_NOT_FOUND,
                resource_type="course",
            )
        return course

    async def list_for_creator(self, creator_id: str) -> List[Dict[str, Any]]:
        """All courses created by ``creator_id``."""
        return await self.find_many(creatorId=self._adapter.reference(creator_id))
