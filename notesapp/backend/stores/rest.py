"""
REST Note Store.

Backend that talks to a PostgREST-compatible endpoint over HTTP
(`{url}/rest/v1/{table}`), as exposed by hosted Postgres services.

Row filters use PostgREST syntax (`id=eq.<id>`) and every write asks for
`Prefer: return=representation`, so the response body is the array of
affected rows. An empty array on get, update, or delete means the id did
not match anything, which is reported as NotFoundError.
"""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

import httpx
from pydantic import ValidationError

from notesapp.backend.core.exceptions import NotFoundError, StorageError
from notesapp.backend.core.logging import get_logger, log_with_source
from notesapp.backend.core.utils import utc_now
from notesapp.backend.schemas.note import Note
from notesapp.backend.stores.base import NoteStore, select_changes

logger = get_logger(__name__)


def _naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def note_from_row(row: dict[str, Any]) -> Note:
    """Map a `notes` table row onto the canonical Note."""
    note = Note(
        id=str(row["id"]),
        title=row["title"],
        content=row["content"],
        color=row["color"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
    return note.model_copy(
        update={
            "created_at": _naive_utc(note.created_at),
            "updated_at": _naive_utc(note.updated_at),
        }
    )


def row_from_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Map note fields onto `notes` table columns, serializing timestamps."""
    row: dict[str, Any] = {}
    for key, value in fields.items():
        row[key] = value.isoformat() if isinstance(value, datetime) else value
    return row


class RestNoteStore(NoteStore):
    """Note store backed by a PostgREST endpoint."""

    backend = "rest"

    def __init__(
        self,
        base_url: str,
        api_key: str,
        table: str = "notes",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            base_url: Service root, e.g. https://project.example.co
            api_key: Key sent as both `apikey` and bearer token
            table: Table holding the notes
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use MockTransport)
        """
        self._path = f"/{table}"
        self._client = httpx.AsyncClient(
            base_url=f"{base_url.rstrip('/')}/rest/v1",
            timeout=timeout,
            transport=transport,
            headers={
                "Content-Type": "application/json",
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Prefer": "return=representation",
            },
        )

    async def _rows(
        self,
        operation: str,
        method: str,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request and return the decoded row array."""
        try:
            response = await self._client.request(method, self._path, params=params, json=json)
        except httpx.HTTPError as e:
            logger.error(
                "Note store request failed",
                extra={"operation": operation, "error": str(e)},
            )
            raise StorageError(f"Failed to {operation}") from e

        log_with_source(
            logger,
            "store",
            "debug",
            "Note store response",
            method=method,
            status_code=response.status_code,
        )

        if response.is_error:
            logger.error(
                "Note store rejected request",
                extra={
                    "operation": operation,
                    "status_code": response.status_code,
                    "body": response.text,
                },
            )
            raise StorageError(f"Failed to {operation}")

        if not response.content:
            return []
        try:
            rows = response.json()
        except ValueError as e:
            logger.error(
                "Note store returned a non-JSON body",
                extra={"operation": operation, "body": response.text[:200]},
            )
            raise StorageError(f"Failed to {operation}") from e

        if not isinstance(rows, list):
            logger.error(
                "Note store returned an unexpected body",
                extra={"operation": operation, "body": response.text[:200]},
            )
            raise StorageError(f"Failed to {operation}")
        return rows

    @staticmethod
    def _notes(operation: str, rows: list[Any]) -> list[Note]:
        """Map rows onto notes; a row that does not fit the table is a storage failure."""
        try:
            return [note_from_row(row) for row in rows]
        except (KeyError, TypeError, ValidationError) as e:
            logger.error(
                "Note store returned a malformed row",
                extra={"operation": operation, "error": str(e)},
            )
            raise StorageError(f"Failed to {operation}") from e

    @staticmethod
    def _match(note_id: str) -> dict[str, str]:
        return {"id": f"eq.{note_id}"}

    async def list(self) -> list[Note]:
        rows = await self._rows("list notes", "GET", params={"order": "updated_at.desc"})
        return self._notes("list notes", rows)

    async def get(self, note_id: str) -> Note:
        rows = await self._rows(
            "fetch note", "GET", params={**self._match(note_id), "limit": "1"}
        )
        if not rows:
            raise NotFoundError(f"Note with ID {note_id} not found")
        return self._notes("fetch note", rows[:1])[0]

    async def create(self, title: str, content: str, color: str) -> Note:
        now = utc_now()
        payload = row_from_fields(
            {
                "id": str(uuid4()),
                "title": title,
                "content": content,
                "color": color,
                "created_at": now,
                "updated_at": now,
            }
        )
        rows = await self._rows("create note", "POST", json=payload)
        if not rows:
            raise StorageError("Failed to create note")
        return self._notes("create note", rows[:1])[0]

    async def update(
        self,
        note_id: str,
        *,
        title: str | None = None,
        content: str | None = None,
        color: str | None = None,
    ) -> Note:
        payload = row_from_fields(
            {**select_changes(title, content, color), "updated_at": utc_now()}
        )
        rows = await self._rows(
            "update note", "PATCH", params=self._match(note_id), json=payload
        )
        if not rows:
            raise NotFoundError(f"Note with ID {note_id} not found")
        return self._notes("update note", rows[:1])[0]

    async def delete(self, note_id: str) -> None:
        rows = await self._rows("delete note", "DELETE", params=self._match(note_id))
        if not rows:
            raise NotFoundError(f"Note with ID {note_id} not found")

    async def ping(self) -> None:
        await self._rows("reach note store", "GET", params={"select": "id", "limit": "1"})

    async def close(self) -> None:
        if not self._client.is_closed:
            await self._client.aclose()
