"""
User Service.

Records users who sign in through the identity provider and issues
their session tokens.
"""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from notesapp.backend.core.exceptions import StorageError
from notesapp.backend.core.security import create_session_token
from notesapp.backend.repositories.user import UserRepository
from notesapp.backend.schemas.user import IdentityProfile, User
from notesapp.backend.services.base import BaseService


class UserService(BaseService):
    """Service for user records."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__()
        self.session = session
        self.repo = UserRepository(session)

    async def record_sign_in(self, profile: IdentityProfile) -> User:
        """
        Insert the signed-in user unless one with that email already exists.

        Idempotent: repeated sign-ins return the originally stored user and
        leave the record untouched.
        """
        self._validate_required(profile.model_dump(), ["email"])
        email = profile.email.strip().lower()

        try:
            existing = await self.repo.get_by_email(email)
            if existing is not None:
                self._log_debug("User already recorded", user_id=existing.id)
                return User.model_validate(existing)

            try:
                record = await self.repo.create(
                    email=email,
                    name=profile.name,
                    image=profile.image,
                    provider=profile.provider or "google",
                )
            except IntegrityError:
                # A concurrent sign-in inserted the same email first.
                await self.session.rollback()
                record = await self.repo.get_by_email(email)
                if record is None:
                    raise
        except SQLAlchemyError as e:
            self._logger.error(
                "Database error",
                extra={"operation": "record_sign_in", "error": str(e)},
            )
            raise StorageError("Failed to record user") from e

        self._log_operation("User recorded", user_id=record.id, provider=record.provider)
        return User.model_validate(record)

    async def get_user(self, user_id: str) -> User:
        """
        Get a user by ID.

        Raises:
            NotFoundError: If user not found
        """
        return User.model_validate(await self.repo.get_by_id(user_id))

    async def complete_sign_in(self, profile: IdentityProfile) -> tuple[User, str]:
        """
        Finish an identity provider sign-in.

        Records the user (idempotently) and issues the session token the
        auth gate accepts as a cookie or bearer token.

        Returns:
            The stored user and its encoded session token
        """
        user = await self.record_sign_in(profile)
        token = create_session_token(user)
        self._log_operation("Session issued", user_id=user.id)
        return user, token
