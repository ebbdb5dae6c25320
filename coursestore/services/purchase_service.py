# ==============================================================================
# PURCHASE SERVICE - User Purchases
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from coursestore.core.constants import DatabaseConstants
from coursestore.database.adapters.base_adapter import BaseDatabaseAdapter
from coursestore.services.base_service import BaseService


class PurchaseService(BaseService):
    """Read-only view of what a user has bought."""

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        super().__init__(adapter, DatabaseConstants.PURCHASES_COLLECTION)

    async def list_for_user(
        self,
        user_id: str,
    ) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
        """
        Fetch a user's purchases and the courses they point at.

        Returns:
            ``(purchases, courses)``; both empty when nothing was bought
        """
        purchases = await self.find_many(userId=self._adapter.reference(user_id))
        if not purchases:
            return [], []

        course_ids = [purchase["courseId"] for purchase in purchases if "courseId" in purchase]
        courses = await self._adapter.find_many(
            DatabaseConstants.COURSES_COLLECTION,
            {"id": {"$in": course_ids}},
        )
        return purchases, courses
