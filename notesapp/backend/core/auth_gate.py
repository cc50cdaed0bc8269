"""
Auth Gate Middleware.

Guards page navigation. Requests for protected paths must carry a valid
session token, read from the session cookie or an `Authorization: Bearer`
header; otherwise they are redirected to the public home path. Public
paths pass through untouched.

API routes are never gated here; they perform their own authorization.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from notesapp.backend.core.config_schema import SessionSchema
from notesapp.backend.core.exceptions import AuthenticationError
from notesapp.backend.core.logging import get_logger
from notesapp.backend.core.security import decode_token

logger = get_logger(__name__)


def extract_session_token(request: Request, cookie_name: str) -> str | None:
    """Session token from the cookie, falling back to a bearer header."""
    token = request.cookies.get(cookie_name)
    if token:
        return token
    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


class AuthGateMiddleware(BaseHTTPMiddleware):
    """Redirect unauthenticated navigation away from protected pages."""

    def __init__(self, app: ASGIApp, session: SessionSchema, api_prefix: str) -> None:
        super().__init__(app)
        self.session = session
        self.api_prefix = api_prefix.rstrip("/") + "/"

    def is_public(self, path: str) -> bool:
        """Whether a path is reachable without a session."""
        if path in self.session.public_paths:
            return True
        if path.startswith(self.api_prefix) or "auth" in path:
            return True
        return any(path.startswith(prefix) for prefix in self.session.public_prefixes)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        path = request.url.path
        if self.is_public(path):
            return await call_next(request)

        token = extract_session_token(request, self.session.cookie_name)
        if token is None:
            logger.info("No session token, redirecting", extra={"path": path})
            return RedirectResponse(self.session.redirect_path, status_code=307)

        try:
            claims = decode_token(token)
        except AuthenticationError:
            logger.info("Invalid session token, redirecting", extra={"path": path})
            return RedirectResponse(self.session.redirect_path, status_code=307)

        request.state.user_id = claims.get("sub")
        return await call_next(request)
