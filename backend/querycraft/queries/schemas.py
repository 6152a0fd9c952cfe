"""
Saved Query Schemas

Pydantic models for saved query requests and responses.
"""

from datetime import datetime

from pydantic import Field

from querycraft.schemas import CamelModel


class SavedQueryCreate(CamelModel):
    """Schema for saving a query."""

    name: str = Field(..., min_length=1, max_length=200)
    sql_query: str = Field(..., min_length=1)
    visualization_config: str | None = None


class SavedQueryResponse(CamelModel):
    id: str
    name: str
    sql_query: str
    visualization_config: str | None
    user_id: str
    created_at: datetime
    updated_at: datetime
