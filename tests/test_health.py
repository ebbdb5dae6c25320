# ==============================================================================
# HEALTH ENDPOINT TESTS
# ==============================================================================

import pytest
from httpx import AsyncClient


class TestHealth:
    """Tests for health check endpoints."""

    @pytest.mark.asyncio
    async def test_health_connected(self, client: AsyncClient, adapter, monkeypatch):
        """Test health reports a reachable store."""

        async def healthy() -> bool:
            return True

        monkeypatch.setattr(adapter, "health_check", healthy)
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "connected"
        assert data["version"]

    @pytest.mark.asyncio
    async def test_health_degraded(self, client: AsyncClient, adapter, monkeypatch):
        """Test health still answers when the store is down."""

        async def unhealthy() -> bool:
            return False

        monkeypatch.setattr(adapter, "health_check", unhealthy)
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"
        assert response.json()["database"] == "disconnected"

    @pytest.mark.asyncio
    async def test_root(self, client: AsyncClient):
        """Test root endpoint returns API info."""
        response = await client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert "name" in data
        assert data["health"] == "/health"

    @pytest.mark.asyncio
    async def test_request_id_header(self, client: AsyncClient):
        """Test every response carries a request id and timing."""
        response = await client.get("/")

        assert response.headers["X-Request-ID"]
        assert response.headers["X-Response-Time"].endswith("ms")
