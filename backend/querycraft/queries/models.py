"""
Saved Query Models

SQLModel entity for queries a user chose to keep.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

from querycraft.users.models import new_id, utc_now

if TYPE_CHECKING:
    from querycraft.users.models import User


class SavedQuery(SQLModel, table=True):
    """A named SQL query with optional chart configuration."""

    __tablename__ = "saved_queries"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    name: str = Field(max_length=200)
    sql_query: str
    visualization_config: str | None = Field(default=None)  # JSON document

    user_id: str = Field(foreign_key="users.id", index=True, ondelete="RESTRICT")
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    # Relationships
    user: "User" = Relationship(back_populates="saved_queries")
