# ==============================================================================
# API DEPENDENCIES - Dependency Injection
# ==============================================================================
# FastAPI dependencies for role gates, security primitives and services
# ==============================================================================

# No postponed annotations: FastAPI resolves RoleGate.__call__ without module globals.

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Annotated, Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from coursestore.core.settings import Settings, get_settings
from coursestore.core.security import PasswordHasher, SessionTokens
from coursestore.core.exceptions import AuthorizationError, InvalidTokenError
from coursestore.database.factory import DatabaseFactory
from coursestore.database.adapters.base_adapter import BaseDatabaseAdapter
from coursestore.services.account_service import (
    ADMIN_NAMESPACE,
    USER_NAMESPACE,
    AccountService,
)
from coursestore.services.course_service import CourseService
from coursestore.services.purchase_service import PurchaseService

logger = logging.getLogger(__name__)

# Bearer scheme; missing or non-bearer headers yield None instead of a 403
bearer_scheme = HTTPBearer(auto_error=False)


# ==============================================================================
# SETTINGS & SECURITY DEPENDENCIES
# ==============================================================================

SettingsDep = Annotated[Settings, Depends(get_settings)]


@lru_cache()
def get_password_hasher() -> PasswordHasher:
    """Process-wide password hasher at the configured work factor."""
    return PasswordHasher(rounds=get_settings().BCRYPT_ROUNDS)


@lru_cache()
def get_admin_tokens() -> SessionTokens:
    """Token issuer/verifier for the admin namespace."""
    settings = get_settings()
    return SessionTokens(settings.JWT_ADMIN_SECRET, settings.JWT_ALGORITHM)


@lru_cache()
def get_user_tokens() -> SessionTokens:
    """Token issuer/verifier for the user namespace."""
    settings = get_settings()
    return SessionTokens(settings.JWT_USER_SECRET, settings.JWT_ALGORITHM)


# ==============================================================================
# AUTHORIZATION GATE
# ==============================================================================

@dataclass(frozen=True)
class Identity:
    """The caller a bearer token resolved to."""

    subject_id: str
    role: str


class RoleGate:
    """
    Dependency that admits only callers holding a token of one role.

    The token is read from ``Authorization: Bearer <token>`` and verified
    with that role's secret. Tokens of the other role, malformed tokens
    and missing headers are all rejected before the route body runs.
    On success the subject id is also recorded on ``request.state``.

    Args:
        role: Role name attached to the resolved identity
        tokens: Callable returning the role's SessionTokens
    """

    def __init__(self, role: str, tokens: Callable[[], SessionTokens]) -> None:
        self.role = role
        self._tokens = tokens

    async def __call__(
        self,
        request: Request,
        credentials: Annotated[
            Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)
        ],
    ) -> Identity:
        if credentials is None:
            raise AuthorizationError()

        try:
            subject_id = self._tokens().verify(credentials.credentials)
        except InvalidTokenError as e:
            logger.info(f"Rejected {self.role} token: {e.reason}")
            raise

        request.state.subject_id = subject_id
        request.state.role = self.role
        return Identity(subject_id=subject_id, role=self.role)


require_admin = RoleGate(ADMIN_NAMESPACE.role, get_admin_tokens)
require_user = RoleGate(USER_NAMESPACE.role, get_user_tokens)

AdminIdentity = Annotated[Identity, Depends(require_admin)]
UserIdentity = Annotated[Identity, Depends(require_user)]


# ==============================================================================
# DATABASE DEPENDENCIES
# ==============================================================================

async def get_adapter() -> BaseDatabaseAdapter:
    """Return the initialized adapter from the factory."""
    return DatabaseFactory.get_adapter()


DatabaseDep = Annotated[BaseDatabaseAdapter, Depends(get_adapter)]


# ==============================================================================
# SERVICE DEPENDENCIES
# ==============================================================================

async def get_admin_account_service(adapter: DatabaseDep) -> AccountService:
    """Account service for the admin namespace."""
    return AccountService(
        adapter,
        ADMIN_NAMESPACE,
        get_password_hasher(),
        get_admin_tokens(),
    )


async def get_user_account_service(adapter: DatabaseDep) -> AccountService:
    """Account service for the user namespace."""
    return AccountService(
        adapter,
        USER_NAMESPACE,
        get_password_hasher(),
        get_user_tokens(),
    )


async def get_course_service(adapter: DatabaseDep) -> CourseService:
    return CourseService(adapter)


async def get_purchase_service(adapter: DatabaseDep) -> PurchaseService:
    return PurchaseService(adapter)


# Annotated service types
AdminAccountServiceDep = Annotated[AccountService, Depends(get_admin_account_service)]
UserAccountServiceDep = Annotated[AccountService, Depends(get_user_account_service)]
CourseServiceDep = Annotated[CourseService, Depends(get_course_service)]
PurchaseServiceDep = Annotated[PurchaseService, Depends(get_purchase_service)]
