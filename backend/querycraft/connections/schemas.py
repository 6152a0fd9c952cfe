"""
Database Connection Schemas

Pydantic models for connection requests and responses.
"""

from datetime import datetime

from pydantic import Field

from querycraft.connections.models import ConnectionType
from querycraft.schemas import CamelModel


class ConnectionCreate(CamelModel):
    """Schema for registering a database connection."""

    name: str = Field(..., min_length=1, max_length=100)
    type: ConnectionType
    connection_string: str = Field(..., min_length=1)


class ConnectionResponse(CamelModel):
    """Schema for connection response. The connection string is only shown masked."""

    id: str
    name: str
    type: ConnectionType
    masked_connection_string: str
    user_id: str
    created_at: datetime
    updated_at: datetime
