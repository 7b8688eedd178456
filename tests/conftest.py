"""Pytest configuration and shared fixtures."""
import asyncio
import os
from typing import Any

import pytest

from musaed.chat import ChatSession, ConversationStore, RequestDispatcher
from musaed.llm import ChatMessage, LLMProvider, LLMResponse

SYSTEM_INSTRUCTION = "Answer briefly."


class ScriptedProvider(LLMProvider):
    """In-process provider that replays scripted replies.

    Each entry of `script` is a reply text, None (a response without text),
    or an exception instance to raise. When the script runs out the provider
    answers with "ok". With `gated=True` every call waits for release().
    """

    def __init__(self, script: list[Any] | None = None, gated: bool = False):
        self._script = list(script or [])
        self._gated = gated
        self._gate = asyncio.Event()
        self.requests: list[list[ChatMessage]] = []
        self.models: list[str | None] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "fake-model"

    def release(self) -> None:
        self._gate.set()

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        self.requests.append(list(messages))
        self.models.append(model)
        if self._gated:
            await self._gate.wait()
        item = self._script.pop(0) if self._script else "ok"
        if isinstance(item, BaseException):
            raise item
        return LLMResponse(content=item, model=model or self.model)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def provider():
    """Provider that answers every request with "ok"."""
    return ScriptedProvider()


@pytest.fixture
def store():
    return ConversationStore()


@pytest.fixture
def make_dispatcher(store):
    """Build a dispatcher over the shared store for a given provider."""
    def _make(llm: LLMProvider, **kwargs: Any) -> RequestDispatcher:
        return RequestDispatcher(llm, store, system_instruction=SYSTEM_INSTRUCTION, **kwargs)
    return _make


@pytest.fixture
def make_session():
    def _make(llm: LLMProvider, **kwargs: Any) -> ChatSession:
        return ChatSession(llm, system_instruction=SYSTEM_INSTRUCTION, **kwargs)
    return _make


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "gemini": os.getenv("GEMINI_API_KEY"),
    }


@pytest.fixture
def scripted():
    """The ScriptedProvider class, for tests that need their own script."""
    return ScriptedProvider
