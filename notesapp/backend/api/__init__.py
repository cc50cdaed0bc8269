"""
API Router.

Aggregates all endpoint routers mounted under the configured API prefix.
"""

from fastapi import APIRouter

from notesapp.backend.api import auth, notes

router = APIRouter()

router.include_router(notes.router, prefix="/notes", tags=["notes"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
