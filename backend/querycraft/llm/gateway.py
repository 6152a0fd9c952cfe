"""
LLM Gateway

Single entry point for calling the configured hosted LLM provider.

The provider is resolved once from settings and handed to the gateway at
construction. Each call builds a LangChain chat model with the per-operation
sampling parameters, sends one message and returns the reply text.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage

from querycraft.errors import ProviderNotConfiguredError, ProviderResponseError

logger = logging.getLogger(__name__)


class ProviderName(str, Enum):
    """Supported LLM providers, in order of preference."""

    GEMINI = "gemini"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GROQ = "groq"
    OLLAMA = "ollama"


@dataclass(frozen=True)
class ProviderConfig:
    """Resolved provider credentials and model."""

    provider: ProviderName
    api_key: str | None
    model: str
    base_url: str | None = None
    timeout: float | None = None


@dataclass(frozen=True)
class ImagePayload:
    """Base64 encoded image attached to a prompt."""

    mime_type: str
    data_base64: str

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data_base64}"


@dataclass(frozen=True)
class LLMRequest:
    """A single prompt with its sampling parameters."""

    prompt: str
    temperature: float = 0.3
    max_tokens: int = 2048
    image: ImagePayload | None = None


@dataclass(frozen=True)
class LLMResponse:
    """Text reply from a provider."""

    text: str
    provider: str


ModelFactory = Callable[[ProviderConfig, float, int], BaseChatModel]


def build_chat_model(config: ProviderConfig, temperature: float, max_tokens: int) -> BaseChatModel:
    """Create the LangChain chat model for a provider."""
    if config.provider == ProviderName.GEMINI:
        from langchain_google_genai import ChatGoogleGenerativeAI

        return ChatGoogleGenerativeAI(
            model=config.model,
            google_api_key=config.api_key,
            temperature=temperature,
            max_output_tokens=max_tokens,
            timeout=config.timeout,
        )

    if config.provider == ProviderName.OPENAI:
        from langchain_openai import ChatOpenAI

        return ChatOpenAI(
            model=config.model,
            api_key=config.api_key,
            temperature=temperature,
            max_tokens=max_tokens,
            timeout=config.timeout,
        )

    if config.provider == ProviderName.ANTHROPIC:
        from langchain_anthropic import ChatAnthropic

        return ChatAnthropic(
            model=config.model,
            api_key=config.api_key,
            temperature=temperature,
            max_tokens=max_tokens,
            timeout=config.timeout,
        )

    if config.provider == ProviderName.GROQ:
        from langchain_groq import ChatGroq

        return ChatGroq(
            model=config.model,
            api_key=config.api_key,
            temperature=temperature,
            max_tokens=max_tokens,
            timeout=config.timeout,
        )

    if config.provider == ProviderName.OLLAMA:
        from langchain_ollama import ChatOllama

        return ChatOllama(
            model=config.model,
            base_url=config.base_url,
            temperature=temperature,
            num_predict=max_tokens,
        )

    raise ValueError(f"Unknown provider: {config.provider}")


def _content_to_text(content: Any) -> str:
    """Flatten a chat model reply into plain text."""
    if isinstance(content, str):
        return content

    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class LLMGateway:
    """Calls the configured provider. One outbound call per request, no retry."""

    def __init__(
        self,
        config: ProviderConfig | None,
        model_factory: ModelFactory = build_chat_model,
    ) -> None:
        self.config = config
        self._model_factory = model_factory

    @property
    def provider_name(self) -> str | None:
        return self.config.provider.value if self.config else None

    async def generate(self, request: LLMRequest, operation: str = "generate") -> LLMResponse:
        """Send a prompt and return the raw reply text."""
        if self.config is None:
            raise ProviderNotConfiguredError()

        provider = self.config.provider.value
        logger.info(
            f"LLM call: provider={provider}, operation={operation}, "
            f"prompt_chars={len(request.prompt)}, image={request.image is not None}"
        )

        if request.image is not None:
            message = HumanMessage(
                content=[
                    {"type": "text", "text": request.prompt},
                    {"type": "image_url", "image_url": {"url": request.image.data_url}},
                ]
            )
        else:
            message = HumanMessage(content=request.prompt)

        try:
            model = self._model_factory(self.config, request.temperature, request.max_tokens)
            reply = await model.ainvoke([message])
        except Exception as e:
            logger.exception(f"LLM call failed: provider={provider}, operation={operation}")
            raise ProviderResponseError(str(e) or type(e).__name__, provider=provider) from e

        return LLMResponse(text=_content_to_text(reply.content), provider=provider)
