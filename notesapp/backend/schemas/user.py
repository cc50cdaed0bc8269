"""
User Schemas.

Profile data received from the identity provider after sign-in, and the
stored user record.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class IdentityProfile(BaseModel):
    """Account details handed over by the identity provider."""

    account_id: str = Field(description="Provider account identifier")
    email: str = Field(min_length=3, description="Verified email address")
    name: str | None = None
    image: str | None = Field(default=None, description="Avatar image URL")
    provider: str = "google"


class User(BaseModel):
    """A stored user."""

    id: str
    email: str
    name: str | None = None
    image: str | None = None
    provider: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
