"""
Security Utilities.

Session tokens issued after sign-in and validated by the auth gate.
Tokens are HS256 JWTs signed with JWT_SECRET from config/.env.
"""

from datetime import timedelta
from typing import Any

from jose import JWTError, jwt

from notesapp.backend.core.config import get_app_config, get_settings
from notesapp.backend.core.exceptions import AuthenticationError
from notesapp.backend.core.logging import get_logger
from notesapp.backend.core.utils import utc_now
from notesapp.backend.schemas.user import User

logger = get_logger(__name__)


def _signing_secret() -> str:
    secret = get_settings().jwt_secret
    if not secret:
        raise AuthenticationError("Session signing is not configured")
    return secret


def create_session_token(user: User, expires_delta: timedelta | None = None) -> str:
    """
    Create a session token for a signed-in user.

    Args:
        user: The stored user
        expires_delta: Optional custom lifetime

    Returns:
        Encoded JWT with `sub` set to the user ID
    """
    jwt_config = get_app_config().security.jwt
    lifetime = expires_delta or timedelta(minutes=jwt_config.access_token_expire_minutes)
    payload: dict[str, Any] = {
        "sub": user.id,
        "email": user.email,
        "name": user.name,
        "exp": utc_now() + lifetime,
        "aud": jwt_config.audience,
    }
    return jwt.encode(payload, _signing_secret(), algorithm=jwt_config.algorithm)


def decode_token(token: str) -> dict[str, Any]:
    """
    Decode and validate a session token.

    Raises:
        AuthenticationError: If token is invalid or expired
    """
    jwt_config = get_app_config().security.jwt
    try:
        return jwt.decode(
            token,
            _signing_secret(),
            algorithms=[jwt_config.algorithm],
            audience=jwt_config.audience,
        )
    except JWTError as e:
        logger.warning("Token decode failed", extra={"error": str(e)})
        raise AuthenticationError("Invalid or expired token") from e
