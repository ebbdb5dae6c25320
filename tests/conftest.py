# ==============================================================================
# CONFTEST - Pytest Fixtures and Configuration
# ==============================================================================
# Shared fixtures for all tests
# ==============================================================================

from __future__ import annotations

import os
from typing import AsyncGenerator
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

# Set test environment before importing the application
os.environ["ENVIRONMENT"] = "development"
os.environ["DEBUG"] = "false"
os.environ["JWT_ADMIN_SECRET"] = "test-admin-secret-for-testing-only-32chars!"
os.environ["JWT_USER_SECRET"] = "test-user-secret-for-testing-only-32chars!!"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["MONGODB_DB"] = "coursestore_test"

from coursestore.database.adapters.mongodb_adapter import MongoDBAdapter  # noqa: E402
from coursestore.database.factory import DatabaseFactory  # noqa: E402

ADMIN_PREFIX = "/api/v1/admin"
USER_PREFIX = "/api/v1/user"


# ==============================================================================
# DATABASE FIXTURES
# ==============================================================================

@pytest_asyncio.fixture
async def adapter() -> AsyncGenerator[MongoDBAdapter, None]:
    """MongoDB adapter backed by an in-process mongomock client."""
    DatabaseFactory.reset()

    mongo_adapter = MongoDBAdapter(
        client=AsyncMongoMockClient(),
        database_name=f"coursestore_test_{uuid4().hex[:8]}",
    )
    await DatabaseFactory.prepare(mongo_adapter)
    DatabaseFactory.register(mongo_adapter)

    yield mongo_adapter

    DatabaseFactory.reset()


# ==============================================================================
# HTTP CLIENT FIXTURES
# ==============================================================================

@pytest_asyncio.fixture
async def client(adapter: MongoDBAdapter) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    from coursestore.main import app

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        timeout=30.0,
    ) as async_client:
        yield async_client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def admin_token(client: AsyncClient, admin_signup_data: dict) -> str:
    """Sign up an admin and return its bearer token."""
    response = await client.post(f"{ADMIN_PREFIX}/signup", json=admin_signup_data)
    assert response.status_code == 200, f"Failed to sign up admin: {response.text}"
    return response.json()["token"]


@pytest_asyncio.fixture
async def user_token(client: AsyncClient, user_signup_data: dict) -> str:
    """Sign up a user and return its bearer token."""
    response = await client.post(f"{USER_PREFIX}/signup", json=user_signup_data)
    assert response.status_code == 200, f"Failed to sign up user: {response.text}"
    return response.json()["token"]


# ==============================================================================
# HELPER FIXTURES
# ==============================================================================

@pytest.fixture
def admin_signup_data() -> dict:
    """Generate admin signup data."""
    return {
        "email": f"admin_{uuid4().hex[:8]}@example.com",
        "password": "Abcdef1!",
        "firstName": "A",
        "lastName": "B",
    }


@pytest.fixture
def user_signup_data() -> dict:
    """Generate user signup data."""
    return {
        "email": f"user_{uuid4().hex[:8]}@example.com",
        "password": "SecurePass123!",
        "firstName": "Sample",
        "lastName": "Learner",
    }


@pytest.fixture
def course_data() -> dict:
    """Generate course creation data."""
    return {
        "title": f"Course {uuid4().hex[:6]}",
        "description": "A test course",
        "imageUrl": "https://cdn.example.com/course.png",
        "price": 49.5,
    }
