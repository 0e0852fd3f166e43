"""
Tests for health and utility endpoints.
"""

import pytest
from httpx import ASGITransport, AsyncClient


@pytest.mark.unit
class TestHealthEndpoints:
    """Test health check endpoints."""

    async def test_health_check(self, client: AsyncClient) -> None:
        """Test basic health check endpoint returns 200."""
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "civiclink-api"}

    async def test_security_headers(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    async def test_request_id_echoed(self, client: AsyncClient) -> None:
        response = await client.get("/health", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"

    async def test_hyphenated_request_id_echoed(self, client: AsyncClient) -> None:
        request_id = "6f1c2a9e-8d4b-4c3e-9a71-0b5e2d7f4c10"
        response = await client.get("/health", headers={"X-Request-ID": request_id})
        assert response.headers["X-Request-ID"] == request_id

    @pytest.mark.parametrize("request_id", ["a" * 65, "abc def", "<script>", "id;drop", "x_y"])
    async def test_invalid_request_id_replaced(self, client: AsyncClient, request_id: str) -> None:
        response = await client.get("/health", headers={"X-Request-ID": request_id})
        echoed = response.headers["X-Request-ID"]
        assert echoed != request_id
        assert len(echoed) == 32
        assert all(c in "0123456789abcdef" for c in echoed)

    async def test_missing_request_id_generated(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        assert len(response.headers["X-Request-ID"]) == 32


@pytest.mark.unit
class TestErrorResponses:
    """Every failure is reported as {"error": message}."""

    async def test_unknown_route(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/nothing-here")
        assert response.status_code == 404
        assert "error" in response.json()

    async def test_unexpected_failure_is_generic_500(self, app, monkeypatch) -> None:
        from services.petition_service import PetitionService

        async def explode(self, status=None):
            raise RuntimeError("connection reset by peer")

        monkeypatch.setattr(PetitionService, "list_petitions", explode)

        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as ac:
            response = await ac.get("/api/v1/petitions")

        assert response.status_code == 500
        body = response.json()
        assert body == {"error": "An internal server error occurred. Please try again later."}
        assert "connection reset" not in response.text


@pytest.mark.unit
class TestAPIDocumentation:
    """Test API documentation endpoints."""

    async def test_openapi_schema_available(self, client: AsyncClient) -> None:
        """Test OpenAPI schema is accessible (only in debug mode)."""
        from core.config import settings

        response = await client.get("/openapi.json")
        if settings.DEBUG:
            assert response.status_code == 200
            assert "/api/v1/messages" in response.json()["paths"]
        else:
            # Docs disabled in production
            assert response.status_code == 404
