"""
Saved Queries Router

API endpoints for a user's saved queries.
"""

from fastapi import APIRouter, HTTPException, status
from sqlmodel import select

from querycraft.dependencies import DBSession, get_user_or_404
from querycraft.queries.models import SavedQuery
from querycraft.queries.schemas import SavedQueryCreate, SavedQueryResponse
from querycraft.schemas import MessageResponse

router = APIRouter()


@router.get("/users/{user_id}/queries", response_model=list[SavedQueryResponse])
async def list_saved_queries(user_id: str, session: DBSession) -> list[SavedQuery]:
    """List a user's saved queries, newest first."""
    await get_user_or_404(session, user_id)
    stmt = (
        select(SavedQuery)
        .where(SavedQuery.user_id == user_id)
        .order_by(SavedQuery.created_at.desc())
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


@router.post(
    "/users/{user_id}/queries",
    response_model=SavedQueryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_saved_query(
    user_id: str, query_data: SavedQueryCreate, session: DBSession
) -> SavedQuery:
    await get_user_or_404(session, user_id)
    saved = SavedQuery(
        name=query_data.name,
        sql_query=query_data.sql_query,
        visualization_config=query_data.visualization_config,
        user_id=user_id,
    )
    session.add(saved)
    await session.commit()
    await session.refresh(saved)
    return saved


@router.delete("/queries/{query_id}", response_model=MessageResponse)
async def delete_saved_query(query_id: str, session: DBSession) -> MessageResponse:
    saved = await session.get(SavedQuery, query_id)
    if saved is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Saved query not found",
        )

    await session.delete(saved)
    await session.commit()
    return MessageResponse(message="Saved query deleted")
