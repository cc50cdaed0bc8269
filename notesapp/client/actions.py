"""
Note Actions.

One coroutine per notes endpoint. Each either returns parsed data or raises
NotesClientError carrying a message fit to show a user. Timestamps arrive
as ISO strings and are parsed into datetime here.
"""

from datetime import datetime
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from notesapp.backend.core.logging import get_logger
from notesapp.client.http import APIClient

logger = get_logger(__name__)


class ClientNote(BaseModel):
    """A note as seen by API consumers, with parsed timestamps."""

    id: str
    title: str
    content: str
    color: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class NotesClientError(Exception):
    """A failed notes request, with a human-readable message."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _error_message(response: httpx.Response, fallback: str) -> str:
    """Pull the server's error message out of an error envelope."""
    try:
        body = response.json()
    except ValueError:
        return fallback
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        return error.get("message") or fallback
    if isinstance(error, str):
        return error
    return fallback


class NotesActions:
    """Raising request helpers for the notes API."""

    def __init__(self, client: APIClient, api_prefix: str = "/api") -> None:
        self.client = client
        self.path = f"{api_prefix.rstrip('/')}/notes"

    async def _send(
        self,
        method: str,
        path: str,
        fallback: str,
        expected: int,
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise NotesClientError(f"{fallback}: notes service unreachable") from e
        if response.status_code != expected:
            message = _error_message(response, fallback)
            logger.warning(
                "Notes request rejected",
                extra={"path": path, "status_code": response.status_code, "error": message},
            )
            raise NotesClientError(message, status_code=response.status_code)
        return response

    async def fetch_notes(self) -> list[ClientNote]:
        response = await self._send("GET", self.path, "Failed to fetch notes", 200)
        return [ClientNote.model_validate(item) for item in response.json()]

    async def fetch_note(self, note_id: str) -> ClientNote:
        response = await self._send(
            "GET", f"{self.path}/{note_id}", f"Failed to fetch note with ID {note_id}", 200
        )
        return ClientNote.model_validate(response.json())

    async def create_note(self, title: str, content: str, color: str) -> ClientNote:
        response = await self._send(
            "POST",
            self.path,
            "Failed to create note",
            201,
            json={"title": title, "content": content, "color": color},
        )
        return ClientNote.model_validate(response.json())

    async def update_note(
        self,
        note_id: str,
        *,
        title: str | None = None,
        content: str | None = None,
        color: str | None = None,
    ) -> ClientNote:
        """Send only the fields that are not None."""
        fields = {"title": title, "content": content, "color": color}
        payload = {key: value for key, value in fields.items() if value is not None}
        response = await self._send(
            "PATCH",
            f"{self.path}/{note_id}",
            f"Failed to update note with ID {note_id}",
            200,
            json=payload,
        )
        return ClientNote.model_validate(response.json())

    async def delete_note(self, note_id: str) -> None:
        await self._send(
            "DELETE", f"{self.path}/{note_id}", f"Failed to delete note with ID {note_id}", 204
        )
