"""
Assistant Dependencies

FastAPI dependencies wiring the LLM gateway into the assistant endpoints.
Tests swap the gateway through app.dependency_overrides[get_gateway].
"""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from querycraft.assistant.service import AssistantService
from querycraft.config import get_settings
from querycraft.llm.gateway import LLMGateway

logger = logging.getLogger(__name__)


@lru_cache
def get_gateway() -> LLMGateway:
    """Build the gateway once from the provider resolved at startup."""
    config = get_settings().resolve_provider()
    if config is None:
        logger.warning("No LLM provider configured; assistant endpoints will return 500")
    else:
        logger.info(f"LLM provider: {config.provider.value} (model={config.model})")
    return LLMGateway(config)


def get_assistant_service(
    gateway: Annotated[LLMGateway, Depends(get_gateway)],
) -> AssistantService:
    return AssistantService(gateway)


Gateway = Annotated[LLMGateway, Depends(get_gateway)]
Assistant = Annotated[AssistantService, Depends(get_assistant_service)]
