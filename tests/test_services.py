# ==============================================================================
# SERVICE TESTS - Accounts, Courses & Purchases
# ==============================================================================
# Service-layer behaviour without the HTTP surface
# ==============================================================================

from __future__ import annotations

import pytest

from coursestore.core.exceptions import (
    AlreadyExistsError,
    AuthenticationError,
    NotFoundError,
)
from coursestore.core.security import PasswordHasher, SessionTokens
from coursestore.schemas.account import AdminSignup, UserSignup
from coursestore.schemas.course import CourseCreate
from coursestore.services.account_service import (
    ADMIN_NAMESPACE,
    USER_NAMESPACE,
    AccountService,
)
from coursestore.services.course_service import CourseService
from coursestore.services.purchase_service import PurchaseService


class CountingHasher(PasswordHasher):
    """Hasher that records how often each operation ran."""

    def __init__(self) -> None:
        super().__init__(rounds=4)
        self.hash_calls = 0
        self.dummy_calls = 0

    def hash(self, password: str) -> str:
        self.hash_calls += 1
        return super().hash(password)

    def dummy_verify(self) -> None:
        self.dummy_calls += 1
        super().dummy_verify()


@pytest.fixture
def hasher() -> CountingHasher:
    return CountingHasher()


@pytest.fixture
def admin_service(adapter, hasher) -> AccountService:
    return AccountService(adapter, ADMIN_NAMESPACE, hasher, SessionTokens("a" * 32))


@pytest.fixture
def user_service(adapter, hasher) -> AccountService:
    return AccountService(adapter, USER_NAMESPACE, hasher, SessionTokens("u" * 32))


def _admin(email: str = "a@x.com") -> AdminSignup:
    return AdminSignup(email=email, password="Abcdef1!", first_name="A", last_name="B")


class TestAccountService:
    """Tests for signup and signin."""

    @pytest.mark.asyncio
    async def test_signup_returns_token_for_new_id(self, admin_service, adapter):
        token = await admin_service.signup(_admin())

        record = await adapter.find_one("admins", {"email": "a@x.com"})
        assert SessionTokens("a" * 32).verify(token) == record["id"]

    @pytest.mark.asyncio
    async def test_duplicate_checked_before_hashing(self, admin_service, hasher):
        """Test a taken email is refused without paying for a hash."""
        await admin_service.signup(_admin())
        assert hasher.hash_calls == 1

        with pytest.raises(AlreadyExistsError) as exc_info:
            await admin_service.signup(_admin())

        assert hasher.hash_calls == 1
        assert exc_info.value.message == "Admin with this email already exists"

    @pytest.mark.asyncio
    async def test_lost_insert_race_is_a_conflict(self, user_service, adapter, monkeypatch):
        """Test a concurrent duplicate that slips past the check still conflicts."""
        await adapter.create("users", {"email": "race@example.com"})

        async def nothing_found(collection, filters):
            return None

        monkeypatch.setattr(adapter, "find_one", nothing_found)
        schema = UserSignup(
            email="race@example.com",
            password="Abcdef1!",
            first_name="Ann",
            last_name="Lee",
        )

        with pytest.raises(AlreadyExistsError) as exc_info:
            await user_service.signup(schema)

        assert exc_info.value.message == "User with this email already exists"

    @pytest.mark.asyncio
    async def test_signin_unknown_email_spends_a_verify(self, admin_service, hasher):
        with pytest.raises(AuthenticationError):
            await admin_service.signin("nobody@example.com", "Abcdef1!")

        assert hasher.dummy_calls == 1

    @pytest.mark.asyncio
    async def test_signin_wrong_password(self, admin_service):
        await admin_service.signup(_admin())

        with pytest.raises(AuthenticationError) as exc_info:
            await admin_service.signin("a@x.com", "Abcdef1?")

        assert exc_info.value.message == "Incorrect credentials"

    @pytest.mark.asyncio
    async def test_namespaces_do_not_share_accounts(self, admin_service, user_service):
        await admin_service.signup(_admin())

        with pytest.raises(AuthenticationError):
            await user_service.signin("a@x.com", "Abcdef1!")


class TestCourseService:
    """Tests for course ownership rules."""

    @pytest.fixture
    def course(self) -> CourseCreate:
        return CourseCreate(
            title="T",
            description="D",
            image_url="https://x.com/i.png",
            price=10,
        )

    @pytest.mark.asyncio
    async def test_create_and_list(self, adapter, course):
        service = CourseService(adapter)
        course_id = await service.create("admin-1", course)
        await service.create("admin-2", course)

        listed = await service.list_for_creator("admin-1")
        assert [c["id"] for c in listed] == [course_id]

    @pytest.mark.asyncio
    async def test_update_strips_identity_fields(self, adapter, course):
        service = CourseService(adapter)
        course_id = await service.create("admin-1", course)

        updated = await service.update(
            "admin-1",
            course_id,
            {"creatorId": "admin-2", "courseId": "x", "_id": "y", "price": 20},
        )

        assert updated["creatorId"] == "admin-1"
        assert updated["price"] == 20
        assert "courseId" not in updated

    @pytest.mark.asyncio
    async def test_update_not_owned(self, adapter, course):
        service = CourseService(adapter)
        course_id = await service.create("admin-1", course)

        with pytest.raises(NotFoundError) as exc_info:
            await service.update("admin-2", course_id, {"price": 0})

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Course not found"


class TestPurchaseService:
    """Tests for purchase lookups."""

    @pytest.mark.asyncio
    async def test_nothing_bought_skips_course_lookup(self, adapter, monkeypatch):
        calls = []
        original = adapter.find_many

        async def tracking_find_many(collection, filters=None, limit=None):
            calls.append(collection)
            return await original(collection, filters, limit)

        monkeypatch.setattr(adapter, "find_many", tracking_find_many)

        assert await PurchaseService(adapter).list_for_user("user-1") == ([], [])
        assert calls == ["purchases"]
