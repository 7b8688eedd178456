"""Unit tests for the LLM provider layer."""
import os
from types import SimpleNamespace
from unittest.mock import AsyncMock

import httpx
import pytest
from google.genai import errors

from musaed.llm import (
    ChatMessage,
    GeminiProvider,
    LLMAPIError,
    LLMConnectionError,
    LLMProvider,
    LLMResponse,
    create_llm_provider,
)


def _part(text):
    return SimpleNamespace(text=text)


def _response(*texts, usage=None):
    parts = [_part(t) for t in texts]
    candidate = SimpleNamespace(content=SimpleNamespace(parts=parts))
    return SimpleNamespace(
        candidates=[candidate] if texts else [],
        text="".join(t for t in texts if t) or None,
        usage_metadata=usage,
    )


@pytest.fixture
def gemini():
    """GeminiProvider whose SDK client is replaced by a mock."""
    provider = GeminiProvider(api_key="fake-key", model="gemini-test")
    generate = AsyncMock(return_value=_response("hi"))
    provider._client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate)))
    return provider, generate


class TestLLMProviderInterface:

    def test_provider_is_abstract(self):
        with pytest.raises(TypeError):
            LLMProvider()  # type: ignore


class TestLLMResponse:

    def test_text_or_default(self):
        assert LLMResponse(content="hi", model="m").text_or("x") == "hi"
        assert LLMResponse(content=None, model="m").text_or("x") == "x"
        assert LLMResponse(content="", model="m").text_or("x") == "x"

    def test_has_text(self):
        assert LLMResponse(content="hi", model="m").has_text
        assert not LLMResponse(model="m").has_text


class TestFactory:

    def test_create_gemini(self):
        provider = create_llm_provider("gemini", api_key="fake-key", model="gemini-test")

        assert isinstance(provider, GeminiProvider)
        assert provider.model == "gemini-test"

    def test_missing_api_key_raises(self):
        with pytest.raises(TypeError, match="api_key"):
            create_llm_provider("gemini")

    def test_unknown_provider_raises(self):
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_llm_provider("nope", api_key="x")


class TestGeminiProvider:

    def test_default_model(self):
        assert GeminiProvider(api_key="fake-key").model == "gemini-3-flash-preview"

    def test_convert_messages(self):
        provider = GeminiProvider(api_key="fake-key")

        system, contents = provider._convert_messages([
            ChatMessage(role="system", content="be nice"),
            ChatMessage(role="user", content="hello"),
            ChatMessage(role="assistant", content="hi"),
        ])

        assert system == "be nice"
        assert [c.role for c in contents] == ["user", "model"]
        assert [c.parts[0].text for c in contents] == ["hello", "hi"]

    def test_convert_rejects_unknown_role(self):
        provider = GeminiProvider(api_key="fake-key")
        with pytest.raises(ValueError, match="Unsupported message role"):
            provider._convert_messages([ChatMessage(role="tool", content="x")])

    def test_extract_joins_text_parts(self):
        provider = GeminiProvider(api_key="fake-key")
        assert provider._extract_content(_response("a", None, "b")) == "ab"

    def test_extract_without_text_is_none(self):
        provider = GeminiProvider(api_key="fake-key")
        assert provider._extract_content(_response()) is None

    @pytest.mark.asyncio
    async def test_chat_completion_request_shape(self, gemini):
        provider, generate = gemini

        response = await provider.chat_completion([
            ChatMessage(role="system", content="instruction"),
            ChatMessage(role="user", content="hello"),
        ])

        assert response.content == "hi"
        assert response.model == "gemini-test"
        kwargs = generate.await_args.kwargs
        assert kwargs["model"] == "gemini-test"
        assert kwargs["config"].system_instruction == "instruction"
        assert kwargs["contents"][0].role == "user"

    @pytest.mark.asyncio
    async def test_chat_completion_model_override(self, gemini):
        provider, generate = gemini

        response = await provider.chat_completion(
            [ChatMessage(role="user", content="hello")], model="other"
        )

        assert response.model == "other"
        assert generate.await_args.kwargs["model"] == "other"

    @pytest.mark.asyncio
    async def test_chat_completion_without_text(self, gemini):
        provider, generate = gemini
        generate.return_value = _response()

        response = await provider.chat_completion([ChatMessage(role="user", content="hello")])

        assert response.content is None

    @pytest.mark.asyncio
    async def test_usage_is_reported(self, gemini):
        provider, generate = gemini
        usage = SimpleNamespace(prompt_token_count=3, candidates_token_count=2, total_token_count=5)
        generate.return_value = _response("hi", usage=usage)

        response = await provider.chat_completion([ChatMessage(role="user", content="hello")])

        assert response.usage == {"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5}

    @pytest.mark.asyncio
    async def test_api_error_is_translated(self, gemini):
        provider, generate = gemini
        generate.side_effect = errors.ClientError(
            429, {"error": {"code": 429, "message": "quota", "status": "RESOURCE_EXHAUSTED"}}
        )

        with pytest.raises(LLMAPIError) as exc_info:
            await provider.chat_completion([ChatMessage(role="user", content="hello")])

        assert exc_info.value.status_code == 429

    @pytest.mark.asyncio
    async def test_transport_error_is_translated(self, gemini):
        provider, generate = gemini
        generate.side_effect = httpx.ConnectError("unreachable")

        with pytest.raises(LLMConnectionError, match="unreachable"):
            await provider.chat_completion([ChatMessage(role="user", content="hello")])

    @pytest.mark.asyncio
    async def test_async_context_manager_closes(self):
        async with GeminiProvider(api_key="fake-key") as provider:
            assert provider.model

    @pytest.mark.asyncio
    @pytest.mark.integration
    async def test_live_completion(self, api_keys):
        if not api_keys["gemini"]:
            pytest.skip("Requires GEMINI_API_KEY")

        provider = GeminiProvider(api_key=api_keys["gemini"], model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"))
        response = await provider.chat_completion([ChatMessage(role="user", content="Say hi")])

        assert response.has_text
