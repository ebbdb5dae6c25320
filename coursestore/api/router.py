# ==============================================================================
# MAIN API ROUTER - Route Aggregation
# ==============================================================================
# Combines all API version routers
# ==============================================================================

from __future__ import annotations

from fastapi import APIRouter

from coursestore.core.settings import settings
from coursestore.api.v1 import admin_router, user_router

# Create main API router
api_router = APIRouter()

# Include v1 routers with API prefix
api_router.include_router(admin_router, prefix=settings.API_V1_PREFIX)
api_router.include_router(user_router, prefix=settings.API_V1_PREFIX)
