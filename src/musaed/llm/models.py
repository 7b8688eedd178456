from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """Represents a chat message sent to a provider."""

    model_config = ConfigDict(frozen=True)

    role: str = Field(description="Role of the message sender: 'user', 'assistant', or 'system'")
    content: str = Field(description="Content of the message")


class LLMResponse(BaseModel):
    """Response from an LLM provider."""

    model_config = ConfigDict(frozen=True)

    content: str | None = Field(
        default=None,
        description="Generated text content, None when the response carried no text"
    )
    model: str = Field(description="Model that generated the response")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Token usage information"
    )

    @property
    def has_text(self) -> bool:
        """Whether the response carries a non-empty text payload."""
        return bool(self.content)

    def text_or(self, default: str) -> str:
        """Return the response text, or `default` when there is none."""
        return self.content if self.content else default

    def summary(self) -> dict[str, Any]:
        """Short description used in debug traces."""
        return {
            "model": self.model,
            "chars": len(self.content or ""),
            "total_tokens": (self.usage or {}).get("total_tokens", 0),
        }
