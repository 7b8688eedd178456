from .base import LLMProvider
from .exceptions import LLMAPIError, LLMConnectionError, LLMError, LLMResponseError
from .factory import create_llm_provider
from .models import ChatMessage, LLMResponse
from .providers import GeminiProvider

__all__ = [
    "LLMProvider",
    "create_llm_provider",
    "ChatMessage",
    "LLMResponse",
    "LLMError",
    "LLMAPIError",
    "LLMConnectionError",
    "LLMResponseError",
    "GeminiProvider",
]
