"""
Query Sharing

Encodes a query (prompt, SQL, dialect, schema) as a base64 JSON blob that can
be embedded in a shareable URL, and decodes it back.
"""

import base64
import binascii
import json
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

SHARE_FORMAT_VERSION = "1.0"


class SharedQuery(BaseModel):
    """Portable snapshot of a generated query."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    version: str = SHARE_FORMAT_VERSION
    query: str = ""
    sql: str = Field(..., min_length=1)
    dialect: str = "postgresql"
    schema_text: str | None = Field(default=None, alias="schema")
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


def encode_shared_query(shared: SharedQuery) -> str:
    """Serialize to URL-safe base64 JSON."""
    payload = shared.model_dump_json(by_alias=True, exclude_none=True)
    return base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii")


def decode_shared_query(token: str) -> SharedQuery:
    """Parse a token produced by encode_shared_query (or the browser's btoa)."""
    token = token.strip()
    padded = token + "=" * (-len(token) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii"))
        data = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeError, ValueError) as e:
        raise ValueError("Invalid query data format") from e

    if not isinstance(data, dict) or not data.get("sql"):
        raise ValueError("Invalid query data")

    try:
        return SharedQuery.model_validate(data)
    except ValidationError as e:
        raise ValueError("Invalid query data") from e
