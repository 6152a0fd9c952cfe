"""
System Router

Health check.
"""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from querycraft.assistant.dependencies import Gateway
from querycraft.config import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str
    version: str
    provider: str | None


@router.get("/health", response_model=HealthResponse)
async def health_check(gateway: Gateway) -> HealthResponse:
    """Liveness plus the LLM provider in use (None when unconfigured)."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=get_settings().app_version,
        provider=gateway.provider_name,
    )
