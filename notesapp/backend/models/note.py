"""
Note Model.

Database table backing the SQL note store.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from notesapp.backend.models.base import Base, TimestampMixin, UUIDMixin


class NoteRecord(UUIDMixin, TimestampMixin, Base):
    """Row in the `notes` table."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    color: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<NoteRecord(id={self.id}, title={self.title!r})>"
