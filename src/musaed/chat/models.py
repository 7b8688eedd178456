"""Data models for the conversation.

Hides the representation of messages and the dispatch state machine.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from uuid_extensions import uuid7


class Role(str, Enum):
    """Author of a message. Values match the Gemini wire roles."""

    USER = "user"
    MODEL = "model"


class DispatchState(str, Enum):
    """Request lifecycle: at most one request is ever in flight."""

    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting-response"


def new_message_id() -> str:
    """Time-ordered unique id (UUIDv7), distinct even within one millisecond."""
    return str(uuid7())


class Message(BaseModel):
    """A single entry of the conversation. Never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_message_id)
    role: Role
    text: str = Field(description="Raw text; markdown for model replies")
    timestamp: datetime = Field(default_factory=datetime.now)

    @classmethod
    def create(cls, role: Role, text: str) -> "Message":
        return cls(role=role, text=text)

    @property
    def is_user(self) -> bool:
        return self.role is Role.USER
