"""
Musaed: an Arabic chat assistant for the Google Gemini API.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .chat import ChatSession, ConversationStore, Message, RequestDispatcher, Role
from .llm import LLMProvider, create_llm_provider

__all__ = [
    "ChatSession",
    "ConversationStore",
    "LLMProvider",
    "Message",
    "RequestDispatcher",
    "Role",
    "create_llm_provider",
]
