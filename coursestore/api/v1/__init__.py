# ==============================================================================
# API V1 ENDPOINTS PACKAGE
# ==============================================================================

"""
API V1 Endpoints
================

Version 1 API endpoint implementations.
"""

from coursestore.api.v1.admin import router as admin_router
from coursestore.api.v1.user import router as user_router

__all__ = [
    "admin_router",
    "user_router",
]
