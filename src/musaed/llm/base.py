from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage, LLMResponse


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    This module hides the design decision of which LLM provider to use.
    Implementations must handle provider-specific details like:
    - API client setup and authentication
    - Request/response format conversion
    - Translating SDK errors into musaed.llm.exceptions

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            response = await provider.chat_completion(messages)
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Default model identifier."""

    @abstractmethod
    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a chat completion.

        Args:
            messages: Conversation history; a leading 'system' message is sent
                as the provider's system instruction
            model: Model to use (None uses provider's default)
            temperature: Sampling temperature (None uses the provider default)
            max_tokens: Maximum tokens to generate
            **kwargs: Provider-specific parameters

        Returns:
            LLMResponse; `content` is None when the provider sent no text

        Raises:
            LLMError: Provider failures, translated from the SDK
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Close the provider on exit.

        "Event loop is closed" errors from httpx/anyio teardown are suppressed.
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
