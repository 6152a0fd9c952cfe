"""
Database Connection Models

SQLModel entity for database connections registered by a user.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

from querycraft.users.models import new_id, utc_now

if TYPE_CHECKING:
    from querycraft.users.models import User


class ConnectionType(str, Enum):
    """Database engines a connection can point at."""

    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    SQLITE = "sqlite"
    SQLSERVER = "sqlserver"


class DatabaseConnection(SQLModel, table=True):
    """External database connection entity."""

    __tablename__ = "database_connections"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    name: str = Field(max_length=100)
    type: ConnectionType
    encrypted_connection_string: str  # Fernet token, see connections.service

    user_id: str = Field(foreign_key="users.id", index=True, ondelete="RESTRICT")
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    # Relationships
    user: "User" = Relationship(back_populates="connections")
