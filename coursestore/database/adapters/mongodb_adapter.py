# ==============================================================================
# MONGODB ADAPTER - Motor Async Driver Implementation
# ==============================================================================
# Document-oriented database adapter with full async support
# Uses Motor for non-blocking MongoDB operations
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from coursestore.core.settings import settings
from coursestore.core.exceptions import DatabaseError
from coursestore.database.adapters.base_adapter import (
    BaseDatabaseAdapter,
    DuplicateRecordError,
)

logger = logging.getLogger(__name__)


class _UnmatchableFilter(Exception):
    """A filter that no stored document can satisfy (e.g. a malformed id)."""


class MongoDBAdapter(BaseDatabaseAdapter[Dict[str, Any]]):
    """
    MongoDB database adapter using Motor async driver.

    Features:
        - Async MongoDB operations using Motor
        - Automatic ObjectId <-> string conversion
        - Unique indexes surfaced as DuplicateRecordError

    A ready client may be passed in (for example a ``mongomock_motor``
    client in tests); otherwise :meth:`connect` builds one from the
    connection URL.

    Example:
        >>> adapter = MongoDBAdapter()
        >>> await adapter.connect()
        >>> doc = await adapter.create("courses", {"title": "Intro"})
        >>> print(doc["id"])  # String ID
    """

    def __init__(
        self,
        connection_url: Optional[str] = None,
        database_name: Optional[str] = None,
        client: Optional[AsyncIOMotorClient] = None,
    ) -> None:
        """
        Initialize MongoDB adapter.

        Args:
            connection_url: MongoDB connection URI (defaults to settings)
            database_name: Database name (defaults to settings)
            client: Pre-built Motor-compatible client
        """
        self._connection_url = connection_url or settings.MONGODB_URL
        self._database_name = database_name or settings.MONGODB_DB
        self._client = client
        self._database: Optional[AsyncIOMotorDatabase] = (
            client[self._database_name] if client is not None else None
        )

    # ==========================================================================
    # ID SERIALIZATION HELPERS
    # ==========================================================================

    @staticmethod
    def _serialize(document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Convert a MongoDB document for the service layer.

        ``_id`` becomes a string ``id`` and any other ObjectId value
        (references written by other tools) becomes a string too.
        """
        result: Dict[str, Any] = {}
        for key, value in document.items():
            if key == "_id":
                result["id"] = str(value)
            elif isinstance(value, ObjectId):
                result[key] = str(value)
            else:
                result[key] = value
        return result

    @staticmethod
    def _deserialize_id(id_value: Any) -> ObjectId:
        """
        Convert string ID to MongoDB ObjectId.

        Raises:
            _UnmatchableFilter: If the value is not a valid ObjectId
        """
        if isinstance(id_value, ObjectId):
            return id_value
        # ObjectId(None) would mint a fresh id
        if id_value is None:
            raise _UnmatchableFilter(id_value)
        try:
            return ObjectId(id_value)
        except (InvalidId, TypeError):
            raise _UnmatchableFilter(id_value)

    def _build_query(
        self,
        filters: Optional[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        Build MongoDB query from filter dictionary.

        ``id`` is mapped to ``_id``; an ``$in`` list of ids keeps only the
        values that can be stored ids.
        """
        if not filters:
            return {}

        query: Dict[str, Any] = {}
        for key, value in filters.items():
            if key != "id":
                query[key] = value
            elif isinstance(value, dict) and "$in" in value:
                ids = []
                for item in value["$in"]:
                    try:
                        ids.append(self._deserialize_id(item))
                    except _UnmatchableFilter:
                        continue
                query["_id"] = {"$in": ids}
            else:
                query["_id"] = self._deserialize_id(value)
        return query

    def reference(self, record_id: str) -> Any:
        """Match a reference stored either as a string or as an ObjectId."""
        if isinstance(record_id, str) and ObjectId.is_valid(record_id):
            return {"$in": [record_id, ObjectId(record_id)]}
        return record_id

    def _collection(self, name: str):
        if self._database is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._database[name]

    # ==========================================================================
    # LIFECYCLE METHODS
    # ==========================================================================

    async def connect(self) -> None:
        """
        Initialize MongoDB connection.

        Creates Motor client (unless one was injected), selects the target
        database and pings it.
        """
        try:
            if self._client is None:
                self._client = AsyncIOMotorClient(
                    self._connection_url,
                    maxPoolSize=settings.DB_POOL_SIZE,
                    minPoolSize=1,
                    maxIdleTimeMS=settings.DB_POOL_TIMEOUT * 1000,
                )
                self._database = self._client[self._database_name]

            await self._client.admin.command("ping")

            logger.info(f"MongoDB adapter connected to {self._database_name}")

        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise DatabaseError() from e

    async def disconnect(self) -> None:
        """Close MongoDB connection."""
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB adapter disconnected")

    async def health_check(self) -> bool:
        """
        Verify database connectivity.

        Returns:
            True if connection is healthy
        """
        try:
            if self._client is not None:
                await self._client.admin.command("ping")
                return True
            return False
        except Exception as e:
            logger.warning(f"MongoDB health check failed: {e}")
            return False

    async def ensure_unique_index(self, collection: str, field: str) -> None:
        """Create a unique ascending index on ``field``."""
        await self._collection(collection).create_index(field, unique=True)
        logger.info(f"Unique index ensured on {collection}.{field}")

    # ==========================================================================
    # RECORD OPERATIONS
    # ==========================================================================

    async def create(
        self,
        collection: str,
        data: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Insert a new document."""
        # MongoDB generates _id
        document = {k: v for k, v in data.items() if k not in ("id", "_id")}

        try:
            result = await self._collection(collection).insert_one(document)
        except DuplicateKeyError as e:
            raise DuplicateRecordError(collection) from e

        document["_id"] = result.inserted_id
        return self._serialize(document)

    async def find_one(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Find a single document matching filters."""
        try:
            query = self._build_query(filters)
        except _UnmatchableFilter:
            return None

        document = await self._collection(collection).find_one(query)
        return self._serialize(document) if document else None

    async def find_many(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Find every document matching filters."""
        try:
            query = self._build_query(filters)
        except _UnmatchableFilter:
            return []

        cursor = self._collection(collection).find(query)
        if limit:
            cursor = cursor.limit(limit)

        documents = await cursor.to_list(length=limit)
        return [self._serialize(doc) for doc in documents]

    async def find_one_and_update(
        self,
        collection: str,
        filters: Dict[str, Any],
        data: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Set fields on the first matching document and return it."""
        try:
            query = self._build_query(filters)
        except _UnmatchableFilter:
            return None

        # Identity is never rewritten
        data = {k: v for k, v in data.items() if k not in ("id", "_id")}
        if not data:
            document = await self._collection(collection).find_one(query)
        else:
            document = await self._collection(collection).find_one_and_update(
                query,
                {"$set": data},
                return_document=ReturnDocument.AFTER,
            )
        return self._serialize(document) if document else None
