# ==============================================================================
# COURSESTORE PACKAGE INITIALIZATION
# ==============================================================================
# Course storefront backend: admin/user accounts, courses, purchases
# ==============================================================================

"""
Course Store Backend
====================

A FastAPI backend for a two-role e-learning storefront.

Features:
---------
- Admin and user signup/signin with bcrypt-hashed passwords
- Per-role JWT bearer tokens signed with separate secrets
- Admin course creation, update and listing scoped to the creator
- User purchase lookup
- MongoDB persistence through the Motor async driver

Usage:
------
    uvicorn coursestore.main:app --reload
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
