"""
Note Schemas.

`Note` is the canonical in-process representation every store returns.
`NoteResponse` is the external camelCase shape; it is the only place the
camelCase names exist on the server side.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NOTE_COLORS: tuple[str, ...] = (
    "gray",
    "red",
    "orange",
    "yellow",
    "green",
    "blue",
    "indigo",
    "purple",
    "pink",
)
"""Color palette offered to users. Stores accept any token."""

NOTE_FIELDS: tuple[str, ...] = ("title", "content", "color")


class Note(BaseModel):
    """A stored note."""

    id: str
    title: str
    content: str
    color: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, frozen=True)


class NoteCreate(BaseModel):
    """
    Request body for creating a note.

    Fields are optional at the schema level so that a missing field is
    reported as a 400 validation failure by the service, not a 422.
    Unknown keys, including any client-supplied id, are ignored. Title and
    color lengths follow the `notes` column widths on every backend.
    """

    title: str | None = Field(
        default=None,
        max_length=255,
        description="Note title",
        examples=["Groceries"],
    )
    content: str | None = Field(
        default=None,
        description="Note content",
        examples=["milk, eggs"],
    )
    color: str | None = Field(
        default=None,
        max_length=32,
        description="Color label",
        examples=["green"],
    )


class NoteUpdate(BaseModel):
    """Request body for a partial note update."""

    title: str | None = Field(default=None, max_length=255, description="Note title")
    content: str | None = Field(default=None, description="Note content")
    color: str | None = Field(default=None, max_length=32, description="Color label")

    def changes(self) -> dict[str, str]:
        """Fields present in the request with a non-null value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class NoteResponse(BaseModel):
    """Note in API responses."""

    id: str = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    color: str = Field(description="Color label")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
