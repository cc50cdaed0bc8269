"""
Integration Tests for Health Endpoints.
"""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from notesapp.backend.core.exceptions import StorageError
from notesapp.backend.main import create_app
from notesapp.backend.stores.rest import RestNoteStore


class TestHealth:
    """Tests for /health and /health/ready."""

    @pytest.mark.asyncio
    async def test_liveness(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    @pytest.mark.asyncio
    async def test_readiness_with_memory_store(self, client: AsyncClient):
        response = await client.get("/health/ready")

        assert response.status_code == 200
        check = response.json()["checks"]["note_store"]
        assert check["status"] == "healthy"
        assert check["backend"] == "memory"

    @pytest.mark.asyncio
    async def test_readiness_when_store_is_down(self, mock_client: AsyncClient, mock_store):
        mock_store.ping.side_effect = StorageError("Failed to reach note store")

        response = await mock_client.get("/health/ready")

        assert response.status_code == 503
        check = response.json()["detail"]["checks"]["note_store"]
        assert check["status"] == "unhealthy"
        assert check["error"] == "Failed to reach note store"

    @pytest.mark.asyncio
    async def test_readiness_when_rest_store_answers_html(self):
        """Should report 503 when the REST backend answers with a non-JSON page."""
        store = RestNoteStore(
            "https://db.example.co",
            "key",
            transport=httpx.MockTransport(
                lambda request: httpx.Response(200, text="<html>proxy</html>")
            ),
        )
        application = create_app(note_store=store)

        async with AsyncClient(
            transport=ASGITransport(app=application, raise_app_exceptions=False),
            base_url="http://test",
        ) as test_client:
            response = await test_client.get("/health/ready")
        await store.close()

        assert response.status_code == 503
        check = response.json()["detail"]["checks"]["note_store"]
        assert check["backend"] == "rest"
        assert check["error"] == "Failed to reach note store"


class TestHomeAndContext:
    """Tests for the public home route and request context headers."""

    @pytest.mark.asyncio
    async def test_home(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 200
        assert set(response.json()) == {"name", "version", "description"}

    @pytest.mark.asyncio
    async def test_request_id_round_trip(self, client: AsyncClient):
        response = await client.get("/health", headers={"X-Request-ID": "req-9"})

        assert response.headers["X-Request-ID"] == "req-9"
        assert "X-Response-Time" in response.headers

    @pytest.mark.asyncio
    async def test_error_carries_request_id(self, client: AsyncClient):
        response = await client.get("/api/notes/ghost", headers={"X-Request-ID": "req-10"})

        assert response.json()["metadata"]["request_id"] == "req-10"
