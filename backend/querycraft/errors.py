"""
QueryCraft - Exceptions

Error taxonomy shared by the LLM gateway and the API routers.
"""

NO_PROVIDER_MESSAGE = (
    "No AI API key configured. "
    "Set GEMINI_API_KEY, OPENAI_API_KEY, ANTHROPIC_API_KEY, or GROQ_API_KEY"
)


class QueryCraftError(Exception):
    """Base class for application errors."""


class LLMError(QueryCraftError):
    """An LLM provider call could not be completed."""


class ProviderNotConfiguredError(LLMError):
    """No provider has an API key configured."""

    def __init__(self, message: str = NO_PROVIDER_MESSAGE) -> None:
        super().__init__(message)


class ProviderResponseError(LLMError):
    """The provider returned an error payload or the call raised."""

    def __init__(self, message: str, provider: str | None = None) -> None:
        super().__init__(message)
        self.provider = provider


class ExtractionError(QueryCraftError):
    """Expected JSON was not found in a provider reply, or was malformed."""
