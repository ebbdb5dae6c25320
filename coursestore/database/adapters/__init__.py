# ==============================================================================
# DATABASE ADAPTERS PACKAGE
# ==============================================================================

"""
Database Adapters
=================

Provides unified interface implementations for document stores:
- BaseDatabaseAdapter: Abstract interface definition
- MongoDBAdapter: MongoDB using Motor async driver
"""

from coursestore.database.adapters.base_adapter import (
    BaseDatabaseAdapter,
    DuplicateRecordError,
)
from coursestore.database.adapters.mongodb_adapter import MongoDBAdapter

__all__ = [
    "BaseDatabaseAdapter",
    "DuplicateRecordError",
    "MongoDBAdapter",
]
