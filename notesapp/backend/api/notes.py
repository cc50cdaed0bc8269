"""
Notes API Endpoints.

REST endpoints mapping one-to-one onto the note store operations.
Responses use the external camelCase note shape.
"""

from fastapi import APIRouter, Response

from notesapp.backend.core.dependencies import NoteServiceDep
from notesapp.backend.schemas.note import NoteCreate, NoteResponse, NoteUpdate

router = APIRouter()


@router.get(
    "",
    response_model=list[NoteResponse],
    summary="List notes",
    description="All notes, most recently updated first.",
)
async def list_notes(service: NoteServiceDep) -> list[NoteResponse]:
    """List all notes."""
    notes = await service.list_notes()
    return [NoteResponse.model_validate(note) for note in notes]


@router.post(
    "",
    response_model=NoteResponse,
    status_code=201,
    summary="Create a note",
    description="Create a note. Title, content, and color are all required.",
)
async def create_note(data: NoteCreate, service: NoteServiceDep) -> NoteResponse:
    """Create a new note."""
    note = await service.create_note(data)
    return NoteResponse.model_validate(note)


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    summary="Get a note",
    description="Get a single note by ID.",
)
async def get_note(note_id: str, service: NoteServiceDep) -> NoteResponse:
    """Get a note by ID."""
    note = await service.get_note(note_id)
    return NoteResponse.model_validate(note)


@router.patch(
    "/{note_id}",
    response_model=NoteResponse,
    summary="Update a note",
    description="Update an existing note. Only provided fields are updated.",
)
async def update_note(
    note_id: str,
    data: NoteUpdate,
    service: NoteServiceDep,
) -> NoteResponse:
    """Update a note."""
    note = await service.update_note(note_id, data)
    return NoteResponse.model_validate(note)


@router.delete(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a note",
    description="Permanently delete a note.",
)
async def delete_note(note_id: str, service: NoteServiceDep) -> Response:
    """Delete a note."""
    await service.delete_note(note_id)
    return Response(status_code=204)
