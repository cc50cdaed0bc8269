"""
SQL Note Store.

Backend for a managed SQL database through SQLAlchemy's asyncio engine.
Each operation runs in its own session and transaction, driving a
NoteRepository. ORM records are converted to `Note` before they leave
the transaction, so callers never see SQLAlchemy objects.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from notesapp.backend.core.exceptions import StorageError
from notesapp.backend.core.logging import get_logger
from notesapp.backend.repositories.note import NoteRepository
from notesapp.backend.schemas.note import Note
from notesapp.backend.stores.base import NoteStore, select_changes

logger = get_logger(__name__)


class SqlNoteStore(NoteStore):
    """Note store backed by the `notes` table."""

    backend = "sql"

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        engine: AsyncEngine | None = None,
    ) -> None:
        """
        Args:
            session_factory: Factory producing sessions bound to the notes database
            engine: Engine to dispose on close(), when the store owns it
        """
        self._session_factory = session_factory
        self._engine = engine

    @asynccontextmanager
    async def _repository(self, operation: str) -> AsyncIterator[NoteRepository]:
        """Open a session and transaction; translate driver errors to StorageError."""
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    yield NoteRepository(session)
        except SQLAlchemyError as e:
            logger.error(
                "Database error",
                extra={"operation": operation, "error": str(e)},
            )
            raise StorageError(f"Failed to {operation}") from e

    async def list(self) -> list[Note]:
        async with self._repository("list notes") as repo:
            records = await repo.list_recent()
            return [Note.model_validate(record) for record in records]

    async def get(self, note_id: str) -> Note:
        async with self._repository("fetch note") as repo:
            record = await repo.get_by_id(note_id)
            return Note.model_validate(record)

    async def create(self, title: str, content: str, color: str) -> Note:
        async with self._repository("create note") as repo:
            record = await repo.create_note(title=title, content=content, color=color)
            return Note.model_validate(record)

    async def update(
        self,
        note_id: str,
        *,
        title: str | None = None,
        content: str | None = None,
        color: str | None = None,
    ) -> Note:
        changes = select_changes(title, content, color)
        async with self._repository("update note") as repo:
            record = await repo.patch(note_id, changes)
            return Note.model_validate(record)

    async def delete(self, note_id: str) -> None:
        async with self._repository("delete note") as repo:
            await repo.delete(note_id)

    async def ping(self) -> None:
        async with self._repository("reach database") as repo:
            await repo.session.execute(text("SELECT 1"))

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
