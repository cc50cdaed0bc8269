"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from notesapp.backend.core.auth_gate import extract_session_token
from notesapp.backend.core.config import get_app_config
from notesapp.backend.core.database import get_db_session
from notesapp.backend.core.exceptions import AuthenticationError
from notesapp.backend.core.security import decode_token
from notesapp.backend.services.note import NoteService
from notesapp.backend.stores.base import NoteStore

DbSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_note_store(request: Request) -> NoteStore:
    """The note store created at startup and owned by the app."""
    return request.app.state.note_store


def get_note_service(store: Annotated[NoteStore, Depends(get_note_store)]) -> NoteService:
    """A NoteService bound to the app's note store."""
    return NoteService(store)


NoteServiceDep = Annotated[NoteService, Depends(get_note_service)]


def get_session_claims(request: Request) -> dict:
    """
    Claims of the caller's session token.

    Raises:
        AuthenticationError: If no valid session token is present
    """
    cookie_name = get_app_config().security.session.cookie_name
    token = extract_session_token(request, cookie_name)
    if token is None:
        raise AuthenticationError("Authentication required")
    return decode_token(token)


SessionClaims = Annotated[dict, Depends(get_session_claims)]
