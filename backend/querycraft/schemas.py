"""
Shared Schemas

Base model for request/response bodies. The browser client speaks camelCase,
so bodies are (de)serialized with camelCase aliases while Python code uses
snake_case attribute names.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """BaseModel accepting and emitting camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str
    success: bool = True
