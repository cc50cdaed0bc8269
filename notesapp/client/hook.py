"""
Notes Hook.

Client-side mirror of the server's note list for presentation code.

The local list only ever reflects successful server responses: create
appends the returned note, update replaces the entry with the same id,
delete removes it. Nothing is applied before the server confirms. A failed
call stores its message in `error` and leaves `notes` as it was.
"""

from notesapp.backend.core.logging import get_logger
from notesapp.client.actions import ClientNote, NotesActions, NotesClientError

logger = get_logger(__name__)

REQUIRED_FIELDS = ("title", "content", "color")


def _blank_fields(fields: dict[str, str | None]) -> list[str]:
    return [name for name, value in fields.items() if value is not None and not value.strip()]


class NotesHook:
    """Note list plus loading and error state. Methods never raise."""

    def __init__(self, actions: NotesActions) -> None:
        self.actions = actions
        self.notes: list[ClientNote] = []
        self.loading = False
        self.error: str | None = None

    def _fail(self, message: str) -> None:
        logger.warning("Notes operation failed", extra={"error": message})
        self.error = message

    async def refresh(self) -> bool:
        """Replace the local list with the server's."""
        self.loading = True
        self.error = None
        try:
            self.notes = await self.actions.fetch_notes()
            return True
        except NotesClientError as e:
            self._fail(e.message or "An error occurred while fetching notes")
            return False
        finally:
            self.loading = False

    async def get(self, note_id: str) -> ClientNote | None:
        """Fetch one note without touching the local list."""
        try:
            return await self.actions.fetch_note(note_id)
        except NotesClientError as e:
            self._fail(e.message or "An error occurred while fetching the note")
            return None

    async def create(self, title: str, content: str, color: str) -> ClientNote | None:
        """Create a note and append it locally once the server returns it."""
        fields = {"title": title, "content": content, "color": color}
        missing = [name for name in REQUIRED_FIELDS if not (fields[name] or "").strip()]
        if missing:
            self._fail(f"Missing required fields: {', '.join(missing)}")
            return None
        try:
            note = await self.actions.create_note(title, content, color)
        except NotesClientError as e:
            self._fail(e.message or "An error occurred while creating the note")
            return None
        self.notes = [*self.notes, note]
        return note

    async def update(
        self,
        note_id: str,
        *,
        title: str | None = None,
        content: str | None = None,
        color: str | None = None,
    ) -> ClientNote | None:
        """Update a note and replace the local entry with the server's copy."""
        fields = {"title": title, "content": content, "color": color}
        if all(value is None for value in fields.values()):
            self._fail("No fields to update")
            return None
        blank = _blank_fields(fields)
        if blank:
            self._fail(f"Fields cannot be blank: {', '.join(blank)}")
            return None
        try:
            note = await self.actions.update_note(note_id, title=title, content=content, color=color)
        except NotesClientError as e:
            self._fail(e.message or "An error occurred while updating the note")
            return None
        self.notes = [note if existing.id == note_id else existing for existing in self.notes]
        return note

    async def delete(self, note_id: str) -> bool:
        """Delete a note and drop it from the local list."""
        try:
            await self.actions.delete_note(note_id)
        except NotesClientError as e:
            self._fail(e.message or "An error occurred while deleting the note")
            return False
        self.notes = [existing for existing in self.notes if existing.id != note_id]
        return True
