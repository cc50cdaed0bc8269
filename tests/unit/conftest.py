"""
Unit Test Fixtures.

Fixtures for unit tests. External services are mocked or replaced with
in-process transports; nothing here needs a running server.
"""

from collections.abc import Callable
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from notesapp.backend.schemas.note import Note
from notesapp.backend.stores.base import NoteStore


# =============================================================================
# Note Fixtures
# =============================================================================


@pytest.fixture
def make_note() -> Callable[..., Note]:
    """
    Factory for Note instances with sensible defaults.

    Usage:
        def test_something(make_note):
            note = make_note(title="Groceries", color="green")
    """

    def _make(**overrides) -> Note:
        stamp = datetime(2024, 1, 1, 12, 0, 0)
        fields = {
            "id": "note-123",
            "title": "Groceries",
            "content": "milk, eggs",
            "color": "green",
            "created_at": stamp,
            "updated_at": stamp,
        }
        fields.update(overrides)
        return Note(**fields)

    return _make


@pytest.fixture
def mock_store() -> AsyncMock:
    """
    Mock note store.

    Every operation is an AsyncMock, so tests can assert exactly which
    store calls were made.
    """
    store = AsyncMock(spec=NoteStore)
    store.backend = "mock"
    return store


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            with patch("module.logger", mock_logger):
                ...
                mock_logger.warning.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger
