"""
Library Router

Starter query templates and shareable query links.
"""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from querycraft.library.sharing import SharedQuery, decode_shared_query, encode_shared_query
from querycraft.library.templates import QueryTemplate, get_template_categories, get_templates

router = APIRouter()


class ShareResponse(BaseModel):
    """Encoded token plus the data it carries."""

    token: str
    data: SharedQuery


@router.get("/templates", response_model=list[QueryTemplate])
async def list_templates(category: str | None = None) -> list[QueryTemplate]:
    """List starter prompts, optionally for one category."""
    return get_templates(category)


@router.get("/templates/categories", response_model=list[str])
async def list_template_categories() -> list[str]:
    return get_template_categories()


@router.post("/share", response_model=ShareResponse)
async def create_share(shared: SharedQuery) -> ShareResponse:
    """Encode a query as a token for a shareable URL."""
    return ShareResponse(token=encode_shared_query(shared), data=shared)


# Standard base64 tokens may contain "/"
@router.get("/share/{token:path}", response_model=SharedQuery)
async def read_share(token: str) -> SharedQuery:
    """Decode a share token back into the query it carries."""
    try:
        return decode_shared_query(token)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
