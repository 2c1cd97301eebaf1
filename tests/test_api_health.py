"""Tests for health check endpoints."""

from unittest.mock import AsyncMock

from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from symbolquest.db.database import get_session
from symbolquest.main import app


class TestHealthEndpoint:
    async def test_health_returns_healthy(self, client: AsyncClient) -> None:
        """Liveness check returns healthy."""
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_health_no_dependency_checks(self, client: AsyncClient) -> None:
        """Health endpoint does not include database or catalog status."""
        data = (await client.get("/health")).json()

        assert data["database"] is None
        assert data["catalog_cards"] is None


class TestReadyEndpoint:
    async def test_ready_when_database_connected(self, client: AsyncClient) -> None:
        response = await client.get("/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["database"] == "connected"
        assert data["catalog_cards"] == 22

    async def test_not_ready_when_database_unreachable(self, client: AsyncClient) -> None:
        """A failing database query reports 503."""
        async def broken_session():
            session = AsyncMock()
            session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
            yield session

        app.dependency_overrides[get_session] = broken_session

        response = await client.get("/ready")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "not ready"
        assert data["database"] == "disconnected"
