# Pydantic schemas package
from notesapp.backend.schemas.base import (
    ErrorDetail,
    ErrorResponse,
    ResponseMetadata,
)
from notesapp.backend.schemas.note import (
    NOTE_COLORS,
    Note,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
)

__all__ = [
    "NOTE_COLORS",
    "ErrorDetail",
    "ErrorResponse",
    "Note",
    "NoteCreate",
    "NoteResponse",
    "NoteUpdate",
    "ResponseMetadata",
]
