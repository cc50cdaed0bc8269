"""
In-Memory Note Store.

Process-local backend for development and tests. State lives as long as
the store instance; nothing is shared between instances.
"""

import asyncio
from uuid import uuid4

from notesapp.backend.core.exceptions import NotFoundError
from notesapp.backend.core.logging import get_logger
from notesapp.backend.core.utils import next_timestamp, utc_now
from notesapp.backend.schemas.note import Note
from notesapp.backend.stores.base import NoteStore, select_changes

logger = get_logger(__name__)


class InMemoryNoteStore(NoteStore):
    """Note store backed by a dict owned by the instance."""

    backend = "memory"

    def __init__(self) -> None:
        self._notes: dict[str, Note] = {}
        self._lock = asyncio.Lock()

    def _require(self, note_id: str) -> Note:
        note = self._notes.get(note_id)
        if note is None:
            raise NotFoundError(f"Note with ID {note_id} not found")
        return note

    async def list(self) -> list[Note]:
        return sorted(self._notes.values(), key=lambda n: n.updated_at, reverse=True)

    async def get(self, note_id: str) -> Note:
        return self._require(note_id)

    async def create(self, title: str, content: str, color: str) -> Note:
        async with self._lock:
            note_id = str(uuid4())
            while note_id in self._notes:
                note_id = str(uuid4())
            now = utc_now()
            note = Note(
                id=note_id,
                title=title,
                content=content,
                color=color,
                created_at=now,
                updated_at=now,
            )
            self._notes[note_id] = note
        logger.debug("Note stored", extra={"note_id": note_id, "backend": self.backend})
        return note

    async def update(
        self,
        note_id: str,
        *,
        title: str | None = None,
        content: str | None = None,
        color: str | None = None,
    ) -> Note:
        async with self._lock:
            current = self._require(note_id)
            changes = select_changes(title, content, color)
            updated = current.model_copy(
                update={**changes, "updated_at": next_timestamp(current.updated_at)}
            )
            self._notes[note_id] = updated
        return updated

    async def delete(self, note_id: str) -> None:
        async with self._lock:
            self._require(note_id)
            del self._notes[note_id]
