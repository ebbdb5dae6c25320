# ==============================================================================
# DATABASE PACKAGE INITIALIZATION
# ==============================================================================
# Document store abstraction layer
# ==============================================================================

"""
Database Module
===============

Provides the persistence boundary for accounts, courses and purchases.

Key Components:
- Adapters: Store-specific implementations
- Factory: Adapter instantiation and lifecycle
"""

from coursestore.database.factory import DatabaseFactory
from coursestore.database.adapters.base_adapter import (
    BaseDatabaseAdapter,
    DuplicateRecordError,
)

__all__ = [
    "DatabaseFactory",
    "BaseDatabaseAdapter",
    "DuplicateRecordError",
]
