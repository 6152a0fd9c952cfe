"""
Users Router

API endpoints for user management.
"""

from fastapi import APIRouter, HTTPException, status
from sqlmodel import func, select

from querycraft.connections.models import DatabaseConnection
from querycraft.dependencies import DBSession, get_user_or_404
from querycraft.queries.models import SavedQuery
from querycraft.schemas import MessageResponse
from querycraft.users.models import User
from querycraft.users.schemas import UserCreate, UserResponse

router = APIRouter()


@router.get("", response_model=list[UserResponse])
async def list_users(session: DBSession) -> list[User]:
    """List all users."""
    result = await session.execute(select(User).order_by(User.created_at))
    return list(result.scalars().all())


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user_data: UserCreate, session: DBSession) -> User:
    """Create a user. Emails are unique."""
    existing = await session.execute(select(User).where(User.email == user_data.email))
    if existing.scalar_one_or_none():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already in use",
        )

    user = User(email=user_data.email, name=user_data.name)
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, session: DBSession) -> User:
    return await get_user_or_404(session, user_id)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: str, session: DBSession) -> MessageResponse:
    """
    Delete a user.
    Refused while the user still owns saved queries or connections.
    """
    user = await get_user_or_404(session, user_id)

    for model in (SavedQuery, DatabaseConnection):
        count_stmt = select(func.count(model.id)).where(model.user_id == user_id)
        count = (await session.execute(count_stmt)).scalar() or 0
        if count:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="User still owns saved queries or connections",
            )

    await session.delete(user)
    await session.commit()
    return MessageResponse(message="User deleted")
