# ==============================================================================
# BASE SERVICE - Generic Business Logic Layer
# ==============================================================================
# Shared plumbing for services bound to one collection
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, List, Optional

from coursestore.database.adapters.base_adapter import BaseDatabaseAdapter


class BaseService:
    """
    Base service bound to a single collection.

    Encapsulates the adapter handle so subclasses only express their
    filters and business rules.

    Attributes:
        _adapter: Database adapter for operations
        _collection_name: Collection identifier
    """

    def __init__(
        self,
        adapter: BaseDatabaseAdapter,
        collection_name: str,
    ) -> None:
        """
        Initialize service.

        Args:
            adapter: Database adapter instance
            collection_name: Collection name
        """
        self._adapter = adapter
        self._collection_name = collection_name

    @property
    def collection_name(self) -> str:
        return self._collection_name

    async def find_one(self, **filters: Any) -> Optional[Dict[str, Any]]:
        """Find a single record by field equality."""
        return await self._adapter.find_one(self._collection_name, filters)

    async def find_many(self, **filters: Any) -> List[Dict[str, Any]]:
        """Find all records by field equality."""
        return await self._adapter.find_many(self._collection_name, filters)
