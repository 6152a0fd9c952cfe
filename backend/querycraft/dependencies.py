"""
Shared Dependencies

FastAPI dependencies used across routers.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from querycraft.database import get_session
from querycraft.users.models import User

DBSession = Annotated[AsyncSession, Depends(get_session)]


async def get_user_or_404(session: AsyncSession, user_id: str) -> User:
    """Load a user or answer 404."""
    user = await session.get(User, user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user
