"""
Pytest Configuration and Fixtures
==================================
Shared fixtures for the QueryCraft test suite.

Settings are cached at import time, so the environment is prepared here
before anything from querycraft is imported.
"""

import os
import tempfile

_TEST_DB_DIR = tempfile.mkdtemp(prefix="querycraft-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/test.db"
for _key in ("GEMINI_API_KEY", "OPENAI_API_KEY", "ANTHROPIC_API_KEY", "GROQ_API_KEY", "OLLAMA_BASE_URL"):
    os.environ.pop(_key, None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from langchain_core.messages import AIMessage  # noqa: E402

from querycraft.assistant.dependencies import get_gateway  # noqa: E402
from querycraft.llm.gateway import LLMGateway, ProviderConfig, ProviderName  # noqa: E402
from querycraft.main import app  # noqa: E402

TEST_PROVIDER = ProviderConfig(
    provider=ProviderName.OPENAI,
    api_key="test-key",
    model="gpt-4o-mini",
)


class ScriptedModels:
    """
    Model factory for LLMGateway handing out fake chat models.

    Set `reply` to the text the provider answers with, or `error` to the
    exception the provider call raises. Every call is recorded in `calls`.
    """

    def __init__(self) -> None:
        self.reply = ""
        self.error: Exception | None = None
        self.calls: list[dict] = []

    def __call__(self, config: ProviderConfig, temperature: float, max_tokens: int) -> "FakeChatModel":
        return FakeChatModel(self, temperature, max_tokens)

    @property
    def last_content(self):
        return self.calls[-1]["content"]

    @property
    def last_prompt(self) -> str:
        content = self.last_content
        if isinstance(content, str):
            return content
        return next(block["text"] for block in content if block["type"] == "text")


class FakeChatModel:
    """Stands in for a LangChain chat model; only ainvoke is used by the gateway."""

    def __init__(self, script: ScriptedModels, temperature: float, max_tokens: int) -> None:
        self.script = script
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def ainvoke(self, messages):
        self.script.calls.append(
            {
                "temperature": self.temperature,
                "max_tokens": self.max_tokens,
                "content": messages[0].content,
            }
        )
        if self.script.error is not None:
            raise self.script.error
        return AIMessage(content=self.script.reply)


@pytest.fixture
def llm() -> ScriptedModels:
    return ScriptedModels()


@pytest.fixture
def gateway(llm: ScriptedModels) -> LLMGateway:
    return LLMGateway(TEST_PROVIDER, model_factory=llm)


@pytest.fixture
def client(gateway: LLMGateway):
    """Test client with the LLM gateway replaced by the scripted one."""
    app.dependency_overrides[get_gateway] = lambda: gateway
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client():
    """Test client whose gateway has no provider configured."""
    app.dependency_overrides[get_gateway] = lambda: LLMGateway(None)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
