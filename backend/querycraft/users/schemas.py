"""
User Schemas

Pydantic models for user requests and responses.
"""

from datetime import datetime

from pydantic import EmailStr, Field

from querycraft.schemas import CamelModel


class UserCreate(CamelModel):
    """Schema for creating a user."""

    email: EmailStr
    name: str | None = Field(default=None, max_length=100)


class UserResponse(CamelModel):
    """Schema for user response."""

    id: str
    email: str
    name: str | None
    created_at: datetime
    updated_at: datetime
