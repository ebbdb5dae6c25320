# ==============================================================================
# USER API TESTS - Accounts & Purchases
# ==============================================================================

from __future__ import annotations

import pytest
from bson import ObjectId

from coursestore.api.dependencies import get_admin_tokens, get_user_tokens

ADMIN_PREFIX = "/api/v1/admin"
USER_PREFIX = "/api/v1/user"


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


class TestUserSignup:
    """Tests for user signup."""

    @pytest.mark.asyncio
    async def test_signup_success(self, client, adapter, user_signup_data):
        response = await client.post(f"{USER_PREFIX}/signup", json=user_signup_data)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Signup succeeded"
        assert get_user_tokens().verify(body["token"])

        record = await adapter.find_one("users", {"email": user_signup_data["email"]})
        assert record["lastName"] == user_signup_data["lastName"]
        assert "password" not in record

    @pytest.mark.asyncio
    async def test_signup_reports_field_errors(self, client, adapter, user_signup_data):
        """Test user signup tells the client which fields failed."""
        payload = dict(user_signup_data, firstName="A", password="weak")
        response = await client.post(f"{USER_PREFIX}/signup", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Incorrect inputs"
        assert {error["field"] for error in body["errors"]} == {"firstName", "password"}
        assert await adapter.find_many("users") == []

    @pytest.mark.asyncio
    async def test_signup_duplicate_email(self, client, user_signup_data):
        await client.post(f"{USER_PREFIX}/signup", json=user_signup_data)
        response = await client.post(f"{USER_PREFIX}/signup", json=user_signup_data)

        assert response.status_code == 400
        assert response.json() == {"message": "User with this email already exists"}

    @pytest.mark.asyncio
    async def test_same_email_in_both_namespaces(self, client, user_signup_data):
        """Test an email may hold an admin account and a user account."""
        admin = await client.post(f"{ADMIN_PREFIX}/signup", json=user_signup_data)
        user = await client.post(f"{USER_PREFIX}/signup", json=user_signup_data)

        assert admin.status_code == 200
        assert user.status_code == 200

    @pytest.mark.asyncio
    async def test_store_failure_is_opaque(self, client, adapter, user_signup_data, monkeypatch):
        """Test store errors answer 500 without leaking their text."""

        async def broken_find_one(collection, filters):
            raise RuntimeError("connection refused by db-internal-7:27017")

        monkeypatch.setattr(adapter, "find_one", broken_find_one)
        response = await client.post(f"{USER_PREFIX}/signup", json=user_signup_data)

        assert response.status_code == 500
        assert response.json() == {"message": "Error while signing up"}


class TestUserSignin:
    """Tests for user signin."""

    @pytest.mark.asyncio
    async def test_signin_success(self, client, user_signup_data):
        await client.post(f"{USER_PREFIX}/signup", json=user_signup_data)

        response = await client.post(
            f"{USER_PREFIX}/signin",
            json={"email": user_signup_data["email"], "password": user_signup_data["password"]},
        )

        assert response.status_code == 200
        assert get_user_tokens().verify(response.json()["token"])

    @pytest.mark.asyncio
    async def test_signin_with_mixed_case_email(self, client, adapter, user_signup_data):
        """Test the email is stored and matched exactly as the user typed it."""
        payload = dict(user_signup_data, email="Ann.Lee@Example.COM")
        await client.post(f"{USER_PREFIX}/signup", json=payload)

        assert await adapter.find_one("users", {"email": "Ann.Lee@Example.COM"}) is not None

        response = await client.post(
            f"{USER_PREFIX}/signin",
            json={"email": "Ann.Lee@Example.COM", "password": payload["password"]},
        )
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_signin_failures_are_indistinguishable(self, client, user_signup_data):
        await client.post(f"{USER_PREFIX}/signup", json=user_signup_data)

        wrong_password = await client.post(
            f"{USER_PREFIX}/signin",
            json={"email": user_signup_data["email"], "password": "Wrong123!"},
        )
        unknown_email = await client.post(
            f"{USER_PREFIX}/signin",
            json={"email": "nobody@example.com", "password": user_signup_data["password"]},
        )

        assert wrong_password.status_code == unknown_email.status_code == 403
        assert wrong_password.json() == unknown_email.json() == {"message": "Incorrect credentials"}

    @pytest.mark.asyncio
    async def test_signin_applies_password_policy(self, client):
        """Test a policy-violating password is a 400, not a credentials check."""
        response = await client.post(
            f"{USER_PREFIX}/signin",
            json={"email": "a@x.com", "password": "alllowercase"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Incorrect inputs"
        assert response.json()["errors"][0]["field"] == "password"

    @pytest.mark.asyncio
    async def test_store_failure_is_opaque(self, client, adapter, monkeypatch):
        async def broken_find_one(collection, filters):
            raise RuntimeError("socket timeout")

        monkeypatch.setattr(adapter, "find_one", broken_find_one)
        response = await client.post(
            f"{USER_PREFIX}/signin",
            json={"email": "a@x.com", "password": "Abcdef1!"},
        )

        assert response.status_code == 500
        assert response.json() == {"message": "Error while signing in"}


class TestPurchases:
    """Tests for the purchase listing."""

    @pytest.mark.asyncio
    async def test_no_purchases(self, client, user_token):
        """Test a fresh user sees two empty lists."""
        response = await client.get(f"{USER_PREFIX}/purchases", headers=bearer(user_token))

        assert response.status_code == 200
        assert response.json() == {"purchases": [], "coursesData": []}

    @pytest.mark.asyncio
    async def test_purchases_with_courses(self, client, adapter, user_token):
        """Test purchases come back with the courses they reference."""
        user_id = get_user_tokens().verify(user_token)
        bought = await adapter.create(
            "courses",
            {"title": "Bought", "description": "D", "imageUrl": "https://x.com/a.png",
             "price": 5, "creatorId": str(ObjectId())},
        )
        await adapter.create(
            "courses",
            {"title": "Not bought", "description": "D", "imageUrl": "https://x.com/b.png",
             "price": 7, "creatorId": str(ObjectId())},
        )
        purchase = await adapter.create("purchases", {"userId": user_id, "courseId": bought["id"]})
        await adapter.create("purchases", {"userId": str(ObjectId()), "courseId": bought["id"]})

        response = await client.get(f"{USER_PREFIX}/purchases", headers=bearer(user_token))

        assert response.status_code == 200
        body = response.json()
        assert [p["id"] for p in body["purchases"]] == [purchase["id"]]
        assert body["purchases"][0]["courseId"] == bought["id"]
        assert [c["title"] for c in body["coursesData"]] == ["Bought"]

    @pytest.mark.asyncio
    async def test_purchases_stored_with_object_ids(self, client, adapter, user_token):
        """Test purchases referencing the user and course by ObjectId are listed."""
        user_id = get_user_tokens().verify(user_token)
        bought = await adapter.create(
            "courses",
            {"title": "Bought", "description": "D", "imageUrl": "https://x.com/a.png",
             "price": 5, "creatorId": str(ObjectId())},
        )
        purchase = await adapter.create(
            "purchases",
            {"userId": ObjectId(user_id), "courseId": ObjectId(bought["id"])},
        )

        response = await client.get(f"{USER_PREFIX}/purchases", headers=bearer(user_token))

        assert response.status_code == 200
        body = response.json()
        assert [p["id"] for p in body["purchases"]] == [purchase["id"]]
        assert body["purchases"][0]["courseId"] == bought["id"]
        assert [c["title"] for c in body["coursesData"]] == ["Bought"]

    @pytest.mark.asyncio
    async def test_purchase_of_deleted_course(self, client, adapter, user_token):
        """Test dangling course references are simply absent from coursesData."""
        user_id = get_user_tokens().verify(user_token)
        await adapter.create("purchases", {"userId": user_id, "courseId": str(ObjectId())})

        response = await client.get(f"{USER_PREFIX}/purchases", headers=bearer(user_token))

        assert response.status_code == 200
        assert len(response.json()["purchases"]) == 1
        assert response.json()["coursesData"] == []

    @pytest.mark.asyncio
    async def test_missing_token(self, client):
        response = await client.get(f"{USER_PREFIX}/purchases")

        assert response.status_code == 403
        assert response.json() == {"message": "You are not signed in"}

    @pytest.mark.asyncio
    async def test_admin_token_rejected(self, client, admin_token):
        """Test admin tokens never open user routes."""
        response = await client.get(f"{USER_PREFIX}/purchases", headers=bearer(admin_token))

        assert response.status_code == 403
        assert response.json() == {"message": "You are not signed in"}

    @pytest.mark.asyncio
    async def test_admin_secret_token_for_user_id_rejected(self, client, user_token):
        user_id = get_user_tokens().verify(user_token)
        forged = get_admin_tokens().issue(user_id)

        response = await client.get(f"{USER_PREFIX}/purchases", headers=bearer(forged))
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_store_failure_is_opaque(self, client, adapter, user_token, monkeypatch):
        async def broken_find_many(collection, filters=None, limit=None):
            raise RuntimeError("cursor killed")

        monkeypatch.setattr(adapter, "find_many", broken_find_many)
        response = await client.get(f"{USER_PREFIX}/purchases", headers=bearer(user_token))

        assert response.status_code == 500
        assert response.json() == {"message": "Error while getting purchases"}
