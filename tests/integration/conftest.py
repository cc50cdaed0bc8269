"""
Integration Test Fixtures.

The real FastAPI application, with its middleware and exception handlers,
driven in-process through httpx.ASGITransport.
"""

from collections.abc import AsyncGenerator
from typing import Any
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from notesapp.backend.core.database import get_db_session
from notesapp.backend.main import create_app
from notesapp.backend.stores.base import NoteStore
from notesapp.backend.stores.memory import InMemoryNoteStore


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def note_store() -> InMemoryNoteStore:
    """Fresh in-memory store per test."""
    return InMemoryNoteStore()


@pytest.fixture
def app(note_store: NoteStore, db_session: AsyncSession, signing_key) -> FastAPI:
    """
    Application wired to the test store and test database session.

    Usage:
        async def test_something(app: FastAPI):
            assert app.state.note_store.backend == "memory"
    """
    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    application = create_app(note_store=note_store)
    application.dependency_overrides[get_db_session] = override_get_db_session
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTP client for the test application.

    Usage:
        async def test_health_endpoint(client: AsyncClient):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def mock_store() -> AsyncMock:
    """Mock note store, for asserting which store calls a request made."""
    store = AsyncMock(spec=NoteStore)
    store.backend = "mock"
    return store


@pytest.fixture
async def mock_client(mock_store: AsyncMock) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for an application backed by mock_store."""
    application = create_app(note_store=mock_store)
    async with AsyncClient(
        transport=ASGITransport(app=application, raise_app_exceptions=False),
        base_url="http://test",
    ) as test_client:
        yield test_client


# =============================================================================
# API Response Assertion Helpers
# =============================================================================


class ApiAssertions:
    """Helper class for API response assertions."""

    NOTE_KEYS = {"id", "title", "content", "color", "createdAt", "updatedAt"}

    @staticmethod
    def assert_note(response: Any, expected_status: int = 200) -> dict[str, Any]:
        """
        Assert the response is a bare note in the external camelCase shape.

        Returns:
            The note JSON
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        note = response.json()
        assert set(note) == ApiAssertions.NOTE_KEYS, f"Unexpected note shape: {note}"
        return note

    @staticmethod
    def assert_error(
        response: Any,
        expected_status: int,
        expected_code: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert API response is an error envelope.

        Args:
            response: httpx Response object
            expected_status: Expected HTTP status code
            expected_code: Expected error code (optional)

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        assert data.get("success") is False, f"Response should be error: {data}"
        assert data.get("error") is not None, f"Missing error details: {data}"

        if expected_code:
            actual_code = data["error"].get("code")
            assert actual_code == expected_code, (
                f"Expected error code {expected_code}, got {actual_code}"
            )

        return data

    @staticmethod
    def assert_validation_error(
        response: Any,
        field: str | None = None,
    ) -> dict[str, Any]:
        """Assert API response is a request validation error (422)."""
        data = ApiAssertions.assert_error(response, 422, "VAL_REQUEST_INVALID")

        if field:
            errors = data["error"].get("details", {}).get("validation_errors", [])
            fields = [e.get("field", "") for e in errors]
            assert any(field in f for f in fields), (
                f"Expected validation error for field '{field}', "
                f"got errors for: {fields}"
            )

        return data


@pytest.fixture
def api() -> ApiAssertions:
    """Provide API assertion helpers."""
    return ApiAssertions()
