# ==============================================================================
# DATABASE FACTORY - Adapter Instantiation & Lifecycle Management
# ==============================================================================
# Factory Pattern for creating and managing database adapters
# Singleton caching of the MongoDB adapter
# ==============================================================================

from __future__ import annotations

import logging
from typing import Optional

from coursestore.core.settings import settings
from coursestore.core.constants import DatabaseConstants
from coursestore.core.exceptions import DatabaseError
from coursestore.database.adapters.base_adapter import BaseDatabaseAdapter
from coursestore.database.adapters.mongodb_adapter import MongoDBAdapter

logger = logging.getLogger(__name__)


class DatabaseFactory:
    """
    Factory class for creating and managing the database adapter.

    Features:
        - Adapter creation from configuration
        - Singleton caching of the adapter instance
        - Lifecycle management (initialize/shutdown)
        - Index provisioning for account collections

    Example:
        >>> # Initialize at application startup
        >>> await DatabaseFactory.initialize()
        >>>
        >>> # Get adapter for database operations
        >>> adapter = DatabaseFactory.get_adapter()
        >>>
        >>> # Shutdown at application exit
        >>> await DatabaseFactory.shutdown()
    """

    _adapter: Optional[BaseDatabaseAdapter] = None

    @classmethod
    def create_adapter(cls, **kwargs) -> BaseDatabaseAdapter:
        """
        Create and return the MongoDB adapter.

        Returns cached instance if available, otherwise creates new.

        Args:
            **kwargs: Adapter configuration
                - connection_url: MongoDB connection URL
                - database_name: MongoDB database name
                - client: Pre-built Motor-compatible client
        """
        if cls._adapter is not None:
            return cls._adapter

        cls._adapter = MongoDBAdapter(
            connection_url=kwargs.get("connection_url"),
            database_name=kwargs.get("database_name"),
            client=kwargs.get("client"),
        )
        logger.info("Created MongoDB adapter")
        return cls._adapter

    @classmethod
    def register(cls, adapter: BaseDatabaseAdapter) -> BaseDatabaseAdapter:
        """Install an already-built adapter, replacing any cached one."""
        cls._adapter = adapter
        return adapter

    @classmethod
    async def prepare(cls, adapter: BaseDatabaseAdapter) -> None:
        """
        Provision the indexes the services rely on.

        Account emails are unique per collection, which closes the window
        between the signup existence check and the insert.
        """
        for collection in DatabaseConstants.ACCOUNT_COLLECTIONS:
            await adapter.ensure_unique_index(collection, "email")

    @classmethod
    async def initialize(cls) -> BaseDatabaseAdapter:
        """
        Initialize database connection.

        Creates adapter, connects and provisions indexes.
        Should be called at application startup.

        Raises:
            DatabaseError: If connection fails
        """
        adapter = cls.create_adapter()

        try:
            await adapter.connect()
            await cls.prepare(adapter)
        except Exception as e:
            logger.error(f"Database initialization failed: {e}")
            raise DatabaseError() from e

        logger.info(f"Database initialized: {settings.MONGODB_DB}")
        return adapter

    @classmethod
    async def shutdown(cls) -> None:
        """
        Close the database connection.

        Should be called at application shutdown.
        """
        if cls._adapter is not None:
            try:
                await cls._adapter.disconnect()
            except Exception as e:
                logger.error(f"Error disconnecting database: {e}")

        cls._adapter = None
        logger.info("Database connection closed")

    @classmethod
    def get_adapter(cls) -> BaseDatabaseAdapter:
        """
        Get existing adapter instance.

        Raises:
            RuntimeError: If adapter not initialized
        """
        if cls._adapter is None:
            raise RuntimeError(
                "Database adapter not initialized. "
                "Call DatabaseFactory.initialize() first."
            )

        return cls._adapter

    @classmethod
    async def health_check(cls) -> bool:
        """
        Check database health.

        Returns:
            True if database is healthy
        """
        try:
            return await cls.get_adapter().health_check()
        except Exception:
            return False

    @classmethod
    def reset(cls) -> None:
        """
        Reset factory state.

        Clears the cached adapter without disconnecting.
        Primarily for testing purposes.
        """
        cls._adapter = None
