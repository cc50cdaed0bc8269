"""
Note Store Interface.

Every persistence backend implements this contract:

    list()                   -> all notes, most recently updated first
    get(id)                  -> the note, or NotFoundError
    create(title, content, color)
                             -> the stored note with a store-assigned id and
                                created_at == updated_at
    update(id, **fields)     -> merges only the given fields, advances
                                updated_at; NotFoundError if absent
    delete(id)               -> removes the note; NotFoundError if absent

Backend failures surface as StorageError. Concurrent updates to the same
note are last-write-wins.
"""

from abc import ABC, abstractmethod

from notesapp.backend.schemas.note import Note


class NoteStore(ABC):
    """Capability interface shared by all note store backends."""

    backend: str = "abstract"

    @abstractmethod
    async def list(self) -> list[Note]:
        """Return all notes ordered by updated_at descending."""

    @abstractmethod
    async def get(self, note_id: str) -> Note:
        """Return a single note."""

    @abstractmethod
    async def create(self, title: str, content: str, color: str) -> Note:
        """Persist a new note and return the stored record."""

    @abstractmethod
    async def update(
        self,
        note_id: str,
        *,
        title: str | None = None,
        content: str | None = None,
        color: str | None = None,
    ) -> Note:
        """Apply a partial update; None means the field is left alone."""

    @abstractmethod
    async def delete(self, note_id: str) -> None:
        """Permanently remove a note."""

    async def ping(self) -> None:
        """Check that the backend is reachable. Raises StorageError if not."""

    async def close(self) -> None:
        """Release backend resources."""


def select_changes(
    title: str | None,
    content: str | None,
    color: str | None,
) -> dict[str, str]:
    """Collect the fields an update actually supplies."""
    fields = {"title": title, "content": content, "color": color}
    return {key: value for key, value in fields.items() if value is not None}
