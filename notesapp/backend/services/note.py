"""
Note Service.

Business logic layer for notes. Validates requests, then delegates to
whichever NoteStore backend the application was started with.
"""

from notesapp.backend.core.exceptions import ValidationError
from notesapp.backend.schemas.note import NOTE_FIELDS, Note, NoteCreate, NoteUpdate
from notesapp.backend.services.base import BaseService
from notesapp.backend.stores.base import NoteStore


class NoteService(BaseService):
    """
    Service for note business logic.

    Validation failures are raised before the store is touched, so an
    invalid request never causes a partial write.
    """

    def __init__(self, store: NoteStore) -> None:
        super().__init__()
        self.store = store

    async def list_notes(self) -> list[Note]:
        """All notes, most recently updated first."""
        return await self.store.list()

    async def get_note(self, note_id: str) -> Note:
        """
        Get a note by ID.

        Raises:
            NotFoundError: If note not found
        """
        return await self.store.get(note_id)

    async def create_note(self, data: NoteCreate) -> Note:
        """
        Create a new note.

        Raises:
            ValidationError: If title, content, or color is missing or blank
        """
        self._validate_required(data.model_dump(), NOTE_FIELDS)

        note = await self.store.create(
            title=data.title,
            content=data.content,
            color=data.color,
        )
        self._log_operation("Note created", note_id=note.id, color=note.color)
        return note

    async def update_note(self, note_id: str, data: NoteUpdate) -> Note:
        """
        Update an existing note. Only supplied fields change.

        Raises:
            ValidationError: If no field is supplied, or a supplied field is blank
            NotFoundError: If note not found
        """
        changes = data.changes()
        if not changes:
            raise ValidationError(
                "No fields to update",
                details={"allowed_fields": list(NOTE_FIELDS)},
            )
        self._validate_required(changes, list(changes))

        note = await self.store.update(note_id, **changes)
        self._log_operation("Note updated", note_id=note_id, fields=list(changes))
        return note

    async def delete_note(self, note_id: str) -> None:
        """
        Delete a note.

        Raises:
            NotFoundError: If note not found
        """
        await self.store.delete(note_id)
        self._log_operation("Note deleted", note_id=note_id)
