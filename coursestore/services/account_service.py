# ==============================================================================
# ACCOUNT SERVICE - Signup & Signin
# ==============================================================================
# Credential checks and token issuance for one role namespace
# ==============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass

from coursestore.core.constants import DatabaseConstants, ErrorMessages
from coursestore.core.exceptions import AlreadyExistsError, AuthenticationError
from coursestore.core.security import PasswordHasher, SessionTokens
from coursestore.database.adapters.base_adapter import (
    BaseDatabaseAdapter,
    DuplicateRecordError,
)
from coursestore.schemas.account import AccountSignup
from coursestore.services.base_service import BaseService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountNamespace:
    """
    One role's slice of the account space.

    Attributes:
        role: Role name carried by identities (``admin`` or ``user``)
        collection: Collection holding this role's accounts
        label: Word used in client messages (``Admin`` or ``User``)
    """

    role: str
    collection: str
    label: str

    @property
    def conflict_message(self) -> str:
        return f"{self.label} with this email already exists"


ADMIN_NAMESPACE = AccountNamespace(
    role="admin",
    collection=DatabaseConstants.ADMINS_COLLECTION,
    label="Admin",
)
USER_NAMESPACE = AccountNamespace(
    role="user",
    collection=DatabaseConstants.USERS_COLLECTION,
    label="User",
)


class AccountService(BaseService):
    """
    Signup and signin for a single role namespace.

    The same class serves admins and users; the namespace decides which
    collection is searched and the tokens decide which secret signs.

    Example:
        >>> service = AccountService(adapter, ADMIN_NAMESPACE, hasher, admin_tokens)
        >>> token = await service.signup(AdminSignup(...))
    """

    def __init__(
        self,
        adapter: BaseDatabaseAdapter,
        namespace: AccountNamespace,
        hasher: PasswordHasher,
        tokens: SessionTokens,
    ) -> None:
        super().__init__(adapter, namespace.collection)
        self.namespace = namespace
        self._hasher = hasher
        self._tokens = tokens

    async def signup(self, schema: AccountSignup) -> str:
        """
        Create an account and return a bearer token for it.

        The email is checked before the password is hashed. A unique
        index backs the check, so a concurrent duplicate insert surfaces
        as the same conflict.

        Raises:
            AlreadyExistsError: If the email is taken in this namespace
        """
        if await self.find_one(email=schema.email):
            raise AlreadyExistsError(
                message=self.namespace.conflict_message,
                resource_type=self.namespace.role,
            )

        document = schema.model_dump(by_alias=True, exclude={"password"})
        document["passwordHash"] = self._hasher.hash(schema.password)

        try:
            account = await self._adapter.create(self._collection_name, document)
        except DuplicateRecordError:
            logger.info(f"Concurrent {self.namespace.role} signup lost the insert race")
            raise AlreadyExistsError(
                message=self.namespace.conflict_message,
                resource_type=self.namespace.role,
            )

        logger.info(f"{self.namespace.label} account created: {account['id']}")
        return self._tokens.issue(account["id"])

    async def signin(self, email: str, password: str) -> str:
        """
        Check credentials and return a bearer token.

        Unknown email and wrong password fail identically.

        Raises:
            AuthenticationError: If the credentials do not match
        """
        account = await self.find_one(email=email)

        if account is None:
            self._hasher.dummy_verify()
            raise AuthenticationError(message=ErrorMessages.INCORRECT_CREDENTIALS)

        if not self._hasher.verify(password, account.get("passwordHash", "")):
            raise AuthenticationError(message=ErrorMessages.INCORRECT_CREDENTIALS)

        return self._tokens.issue(account["id"])
