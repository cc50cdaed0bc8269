"""
Auth API Endpoints.

Session introspection for clients. Sign-in itself is handled by the
identity provider integration, which calls UserService.complete_sign_in
to record the user and obtain the session token; this service exposes no
unauthenticated sign-in route.

Users live in the relational database regardless of `store.backend`, so
this endpoint needs the database from database.yaml to be reachable even
when notes are served from the memory or REST store.
"""

from fastapi import APIRouter

from notesapp.backend.core.dependencies import DbSession, SessionClaims
from notesapp.backend.schemas.user import User
from notesapp.backend.services.user import UserService

router = APIRouter()


@router.get(
    "/session",
    response_model=User,
    summary="Current user",
    description="Return the user behind the caller's session token.",
)
async def get_session_user(claims: SessionClaims, db: DbSession) -> User:
    """Resolve the session token to the stored user."""
    service = UserService(db)
    return await service.get_user(claims["sub"])
