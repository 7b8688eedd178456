"""Google Gemini LLM provider implementation.

Uses the official Google GenAI SDK for async chat completions.
Reference: https://github.com/googleapis/python-genai

Note: Gemini can return responses without any text part (safety filtering,
empty candidates). Those come back as LLMResponse(content=None) so the caller
decides what to show; they are not treated as errors.
"""

from typing import Any

import httpx
from google import genai
from google.genai import errors, types

from ..base import LLMProvider
from ..exceptions import LLMAPIError, LLMConnectionError, LLMResponseError
from ..models import ChatMessage, LLMResponse

DEFAULT_MODEL = "gemini-3-flash-preview"


class GeminiProvider(LLMProvider):
    """Google Gemini LLM provider implementation.

    Hidden design decisions:
    - Google GenAI client initialization
    - Message format conversion ('assistant' is sent as Gemini's 'model' role)
    - Error translation from the SDK into musaed.llm.exceptions
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        **client_kwargs: Any
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Google AI API key
            model: Default model identifier
            **client_kwargs: Additional kwargs for Client
        """
        self._model = model
        self._client = genai.Client(api_key=api_key, **client_kwargs)

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    def _convert_messages(self, messages: list[ChatMessage]) -> tuple[str | None, list[types.Content]]:
        """Convert ChatMessage list to Gemini format.

        Returns:
            Tuple of (system_instruction, contents)
        """
        system_instruction = None
        contents = []

        for msg in messages:
            if msg.role == "system":
                system_instruction = msg.content
            elif msg.role == "user":
                contents.append(types.Content(
                    role="user",
                    parts=[types.Part(text=msg.content)]
                ))
            elif msg.role in ("assistant", "model"):
                contents.append(types.Content(
                    role="model",
                    parts=[types.Part(text=msg.content)]
                ))
            else:
                raise ValueError(f"Unsupported message role: {msg.role}")

        return system_instruction, contents

    def _extract_content(self, response: Any) -> str | None:
        """Extract text content from a Gemini response.

        Returns:
            The joined text parts, or None when the response has no text
        """
        if response is None:
            raise LLMResponseError("empty response object")

        candidates = getattr(response, "candidates", None)
        if candidates:
            candidate = candidates[0]
            content = getattr(candidate, "content", None)
            if content is not None and content.parts:
                texts = [part.text for part in content.parts if getattr(part, "text", None)]
                if texts:
                    return "".join(texts)

        # Fallback to response.text (may raise or return None)
        try:
            return response.text or None
        except (ValueError, AttributeError):
            return None

    def _extract_usage(self, response: Any) -> dict[str, int] | None:
        metadata = getattr(response, "usage_metadata", None)
        if not metadata:
            return None
        return {
            "prompt_tokens": metadata.prompt_token_count or 0,
            "completion_tokens": metadata.candidates_token_count or 0,
            "total_tokens": metadata.total_token_count or 0,
        }

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a chat completion using Google Gemini.

        Args:
            messages: Conversation history
            model: Model to use (overrides default)
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate
            **kwargs: Additional GenerateContentConfig fields

        Returns:
            LLMResponse with generated content (None if no text came back)

        Raises:
            LLMConnectionError: Transport failure
            LLMAPIError: Gemini reported an error status
            LLMResponseError: The response could not be interpreted
        """
        model_to_use = model or self._model
        system_instruction, contents = self._convert_messages(messages)

        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=temperature,
            **kwargs
        )
        if max_tokens is not None:
            config.max_output_tokens = max_tokens

        try:
            response = await self._client.aio.models.generate_content(
                model=model_to_use,
                contents=contents,
                config=config
            )
        except errors.APIError as e:
            raise LLMAPIError(e.message or str(e), status_code=e.code) from e
        except (httpx.TransportError, OSError) as e:
            raise LLMConnectionError(str(e)) from e

        return LLMResponse(
            content=self._extract_content(response),
            model=model_to_use,
            usage=self._extract_usage(response)
        )

    async def close(self) -> None:
        """Close the Gemini client.

        Note: The Google GenAI client doesn't require explicit closing,
        but we implement this for interface consistency.
        """
        pass
