"""
User Models

SQLModel entities for user management.
"""

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from querycraft.connections.models import DatabaseConnection
    from querycraft.queries.models import SavedQuery


def new_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class User(SQLModel, table=True):
    """Owner of saved queries and database connections."""

    __tablename__ = "users"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    email: str = Field(unique=True, index=True, max_length=255)
    name: str | None = Field(default=None, max_length=100)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    # Relationships
    saved_queries: list["SavedQuery"] = Relationship(back_populates="user")
    connections: list["DatabaseConnection"] = Relationship(back_populates="user")
