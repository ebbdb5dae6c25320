# ==============================================================================
# API PACKAGE INITIALIZATION
# ==============================================================================

"""
API Module
==========

FastAPI routers and endpoint definitions:
- Dependencies: role gates, security primitives, services
- Routers: Admin, User
"""

from coursestore.api.router import api_router

__all__ = ["api_router"]
