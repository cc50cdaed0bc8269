"""
Note Repository.

Data access for the `notes` table. Used by the SQL note store, one
repository per session.
"""

from sqlalchemy import select

from notesapp.backend.core.utils import next_timestamp, utc_now
from notesapp.backend.models.note import NoteRecord
from notesapp.backend.repositories.base import BaseRepository


class NoteRepository(BaseRepository[NoteRecord]):
    """Repository for NoteRecord."""

    model = NoteRecord
    label = "Note"

    async def list_recent(self) -> list[NoteRecord]:
        """All notes, most recently updated first."""
        result = await self.session.execute(
            select(NoteRecord).order_by(NoteRecord.updated_at.desc())
        )
        return list(result.scalars().all())

    async def create_note(self, title: str, content: str, color: str) -> NoteRecord:
        """Insert a note with identical created/updated timestamps."""
        now = utc_now()
        return await self.create(
            title=title,
            content=content,
            color=color,
            created_at=now,
            updated_at=now,
        )

    async def patch(self, id: str, changes: dict[str, str]) -> NoteRecord:
        """
        Apply a partial update and advance updated_at.

        Raises:
            NotFoundError: If the note does not exist
        """
        record = await self.get_by_id(id)
        for key, value in changes.items():
            setattr(record, key, value)
        record.updated_at = next_timestamp(record.updated_at)
        await self.session.flush()
        await self.session.refresh(record)
        return record
