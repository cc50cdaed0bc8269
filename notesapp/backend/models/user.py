"""
User Model.

Users are recorded on first sign-in and looked up by email afterwards.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from notesapp.backend.core.utils import utc_now
from notesapp.backend.models.base import Base, UUIDMixin


class UserRecord(UUIDMixin, Base):
    """Row in the `users` table."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(320),
        unique=True,
        nullable=False,
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    image: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    provider: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<UserRecord(id={self.id}, email={self.email!r})>"
