# ==============================================================================
# SERVICES PACKAGE
# ==============================================================================

"""
Business logic services:
- AccountService: signup/signin per role namespace
- CourseService: admin course management
- PurchaseService: user purchase lookup
"""

from coursestore.services.base_service import BaseService
from coursestore.services.account_service import (
    ADMIN_NAMESPACE,
    USER_NAMESPACE,
    AccountNamespace,
    AccountService,
)
from coursestore.services.course_service import CourseService
from coursestore.services.purchase_service import PurchaseService

__all__ = [
    "BaseService",
    "ADMIN_NAMESPACE",
    "USER_NAMESPACE",
    "AccountNamespace",
    "AccountService",
    "CourseService",
    "PurchaseService",
]
