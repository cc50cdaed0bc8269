"""
Unit Tests for Note Service.

Tests the NoteService validation rules with a mocked note store.
"""

import pytest

from notesapp.backend.core.exceptions import NotFoundError, ValidationError
from notesapp.backend.schemas.note import NoteCreate, NoteUpdate
from notesapp.backend.services.note import NoteService


@pytest.fixture
def service(mock_store) -> NoteService:
    return NoteService(mock_store)


class TestNoteServiceCreate:
    """Tests for note creation."""

    @pytest.mark.asyncio
    async def test_create_note_success(self, service, mock_store, make_note):
        """Should pass all three fields to the store."""
        mock_store.create.return_value = make_note()

        data = NoteCreate(title="Groceries", content="milk, eggs", color="green")
        result = await service.create_note(data)

        mock_store.create.assert_awaited_once_with(
            title="Groceries",
            content="milk, eggs",
            color="green",
        )
        assert result.id == "note-123"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["title", "content", "color"])
    async def test_create_missing_field(self, service, mock_store, missing):
        """Should reject a missing field without touching the store."""
        fields = {"title": "T", "content": "C", "color": "gray"}
        del fields[missing]

        with pytest.raises(ValidationError) as exc_info:
            await service.create_note(NoteCreate(**fields))

        assert exc_info.value.details["missing_fields"] == [missing]
        mock_store.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_blank_field(self, service, mock_store):
        """Should treat whitespace-only values as missing."""
        with pytest.raises(ValidationError):
            await service.create_note(NoteCreate(title="  ", content="C", color="gray"))

        mock_store.create.assert_not_called()


class TestNoteServiceUpdate:
    """Tests for partial updates."""

    @pytest.mark.asyncio
    async def test_update_passes_only_supplied_fields(self, service, mock_store, make_note):
        mock_store.update.return_value = make_note(color="blue")

        result = await service.update_note("note-123", NoteUpdate(color="blue"))

        mock_store.update.assert_awaited_once_with("note-123", color="blue")
        assert result.color == "blue"

    @pytest.mark.asyncio
    async def test_empty_patch_makes_no_store_calls(self, service, mock_store):
        """Should reject an empty patch before any store access."""
        with pytest.raises(ValidationError) as exc_info:
            await service.update_note("note-123", NoteUpdate())

        assert exc_info.value.message == "No fields to update"
        assert mock_store.method_calls == []

    @pytest.mark.asyncio
    async def test_null_fields_count_as_absent(self, service, mock_store):
        with pytest.raises(ValidationError):
            await service.update_note("note-123", NoteUpdate(title=None, color=None))

        mock_store.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_supplied_field(self, service, mock_store):
        with pytest.raises(ValidationError):
            await service.update_note("note-123", NoteUpdate(title=""))

        mock_store.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_not_found_propagates(self, service, mock_store):
        mock_store.update.side_effect = NotFoundError("Note with ID ghost not found")

        with pytest.raises(NotFoundError):
            await service.update_note("ghost", NoteUpdate(title="x"))


class TestNoteServiceReadDelete:
    """Tests for list, get and delete."""

    @pytest.mark.asyncio
    async def test_list_notes(self, service, mock_store, make_note):
        mock_store.list.return_value = [make_note(id="a"), make_note(id="b")]

        result = await service.list_notes()

        assert [note.id for note in result] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_get_note_not_found(self, service, mock_store):
        mock_store.get.side_effect = NotFoundError("Note with ID ghost not found")

        with pytest.raises(NotFoundError):
            await service.get_note("ghost")

    @pytest.mark.asyncio
    async def test_delete_note(self, service, mock_store):
        await service.delete_note("note-123")

        mock_store.delete.assert_awaited_once_with("note-123")
