# ==============================================================================
# BASE DATABASE ADAPTER - Abstract Interface
# ==============================================================================
# Defines the contract for document store adapters
# ==============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

# Type variable for records returned by the adapter
T = TypeVar("T")


class BaseDatabaseAdapter(ABC, Generic[T]):
    """
    Abstract Base Class for document store adapters.

    Records are addressed by a store-assigned ``id`` (always exposed as a
    string) and by equality filters. A filter value may also be an
    operator dictionary such as ``{"$in": [...]}``.

    Generic Parameters:
        T: The type of records returned by the adapter

    Thread Safety:
        All methods are async and designed for concurrent access.
        Connection pooling is handled by the underlying driver.

    Example:
        >>> adapter = MongoDBAdapter()
        >>> await adapter.connect()
        >>> admin = await adapter.create("admins", {"email": "a@example.com"})
        >>> await adapter.disconnect()
    """

    # ==========================================================================
    # LIFECYCLE METHODS
    # ==========================================================================

    @abstractmethod
    async def connect(self) -> None:
        """
        Establish the store connection.

        Raises:
            DatabaseError: If the store is unreachable
        """
        ...

    @abstractmethod
    async def disconnect(self) -> None:
        """Release the connection and its pool."""
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Verify store connectivity.

        Returns:
            True if the store answers, False otherwise
        """
        ...

    @abstractmethod
    async def ensure_unique_index(self, collection: str, field: str) -> None:
        """
        Guarantee that no two records in ``collection`` share ``field``.

        After this call, :meth:`create` raises ``DuplicateRecordError``
        instead of inserting a second record with the same value.
        """
        ...

    # ==========================================================================
    # RECORD OPERATIONS
    # ==========================================================================

    @abstractmethod
    async def create(
        self,
        collection: str,
        data: Dict[str, Any],
    ) -> T:
        """
        Insert a new record.

        Args:
            collection: Collection name
            data: Record fields (any ``id`` key is ignored)

        Returns:
            The stored record including its new ``id``

        Raises:
            DuplicateRecordError: If a unique index rejects the record
        """
        ...

    @abstractmethod
    async def find_one(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> Optional[T]:
        """
        Find a single record matching every filter.

        Returns:
            The record, or None when nothing matches
        """
        ...

    @abstractmethod
    async def find_many(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
        limit: Optional[int] = None,
    ) -> List[T]:
        """
        Find every record matching the filters.

        Args:
            collection: Collection name
            filters: Equality or operator filters; None matches all
            limit: Optional maximum number of records

        Returns:
            Matching records in insertion order
        """
        ...

    @abstractmethod
    async def find_one_and_update(
        self,
        collection: str,
        filters: Dict[str, Any],
        data: Dict[str, Any],
    ) -> Optional[T]:
        """
        Set ``data`` on the first record matching ``filters``.

        The match and the write happen in one store operation, so the
        filter doubles as an ownership predicate.

        Returns:
            The record after the update, or None when nothing matched
        """
        ...

    def reference(self, record_id: str) -> Any:
        """
        Filter value matching a field that references ``record_id``.

        Records written by other tools may hold references in the store's
        native id type rather than as strings. Adapters whose ids have a
        native form override this to match both.
        """
        return record_id


class DuplicateRecordError(Exception):
    """Raised by :meth:`BaseDatabaseAdapter.create` on a unique index clash."""

    def __init__(self, collection: str, field: Optional[str] = None) -> None:
        self.collection = collection
        self.field = field
        super().__init__(f"Duplicate record in {collection}")
