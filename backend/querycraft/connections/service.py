"""
Database Connection Service

Business logic for stored database connections. Connection strings carry
credentials, so they are encrypted at rest and only decrypted on demand.
"""

import base64
import hashlib
from functools import lru_cache

from cryptography.fernet import Fernet
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from querycraft.config import get_settings
from querycraft.connections.models import ConnectionType, DatabaseConnection


@lru_cache
def get_fernet() -> Fernet:
    """Fernet instance keyed from SECRET_KEY."""
    digest = hashlib.sha256(get_settings().secret_key.encode()).digest()
    return Fernet(base64.urlsafe_b64encode(digest))


def encrypt_connection_string(connection_string: str) -> str:
    """Encrypt a connection string for storage."""
    return get_fernet().encrypt(connection_string.encode()).decode()


def decrypt_connection_string(encrypted: str) -> str:
    """Decrypt a stored connection string."""
    return get_fernet().decrypt(encrypted.encode()).decode()


def mask_connection_string(connection_string: str) -> str:
    """Hide the password portion of a URL style connection string."""
    scheme, sep, rest = connection_string.partition("://")
    if not sep or "@" not in rest:
        return connection_string
    credentials, _, host = rest.rpartition("@")
    user = credentials.split(":", 1)[0]
    return f"{scheme}://{user}:****@{host}"


async def create_connection(
    session: AsyncSession,
    user_id: str,
    name: str,
    type: ConnectionType,
    connection_string: str,
) -> DatabaseConnection:
    """Create a new database connection."""
    connection = DatabaseConnection(
        name=name,
        type=type,
        encrypted_connection_string=encrypt_connection_string(connection_string),
        user_id=user_id,
    )

    session.add(connection)
    await session.commit()
    await session.refresh(connection)

    return connection


async def get_user_connections(session: AsyncSession, user_id: str) -> list[DatabaseConnection]:
    """Get all connections owned by a user."""
    statement = (
        select(DatabaseConnection)
        .where(DatabaseConnection.user_id == user_id)
        .order_by(DatabaseConnection.created_at)
    )
    result = await session.execute(statement)
    return list(result.scalars().all())


async def delete_connection(session: AsyncSession, connection: DatabaseConnection) -> None:
    await session.delete(connection)
    await session.commit()
