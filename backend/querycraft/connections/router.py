"""
Database Connections Router

API endpoints for registering and removing database connections.
"""

from fastapi import APIRouter, HTTPException, status

from querycraft.connections.models import DatabaseConnection
from querycraft.connections.schemas import ConnectionCreate, ConnectionResponse
from querycraft.connections.service import (
    create_connection,
    decrypt_connection_string,
    delete_connection,
    get_user_connections,
    mask_connection_string,
)
from querycraft.dependencies import DBSession, get_user_or_404
from querycraft.schemas import MessageResponse

router = APIRouter()


def _to_response(connection: DatabaseConnection) -> ConnectionResponse:
    return ConnectionResponse(
        id=connection.id,
        name=connection.name,
        type=connection.type,
        masked_connection_string=mask_connection_string(
            decrypt_connection_string(connection.encrypted_connection_string)
        ),
        user_id=connection.user_id,
        created_at=connection.created_at,
        updated_at=connection.updated_at,
    )


@router.get("/users/{user_id}/connections", response_model=list[ConnectionResponse])
async def list_connections(user_id: str, session: DBSession) -> list[ConnectionResponse]:
    await get_user_or_404(session, user_id)
    return [_to_response(conn) for conn in await get_user_connections(session, user_id)]


@router.post(
    "/users/{user_id}/connections",
    response_model=ConnectionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_connection(
    user_id: str, connection_data: ConnectionCreate, session: DBSession
) -> ConnectionResponse:
    """Register a connection. The connection string is stored encrypted."""
    await get_user_or_404(session, user_id)
    connection = await create_connection(
        session,
        user_id=user_id,
        name=connection_data.name,
        type=connection_data.type,
        connection_string=connection_data.connection_string,
    )
    return _to_response(connection)


@router.delete("/connections/{connection_id}", response_model=MessageResponse)
async def remove_connection(connection_id: str, session: DBSession) -> MessageResponse:
    connection = await session.get(DatabaseConnection, connection_id)
    if connection is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Connection not found",
        )

    await delete_connection(session, connection)
    return MessageResponse(message="Connection deleted")
