"""Conversation core: messages, store, request dispatch and session state.

Module structure:
- models.py: Message, Role and the dispatch state machine
- store.py: append-only conversation sequence
- dispatcher.py: single in-flight request to the model
- session.py: controller owning {conversation, draft, pending}
- config.py: fixed reply strings
"""

from .config import ERROR_REPLY, FALLBACK_REPLY
from .dispatcher import RequestDispatcher
from .models import DispatchState, Message, Role
from .session import ChatSession
from .store import ConversationStore

__all__ = [
    "ChatSession",
    "ConversationStore",
    "DispatchState",
    "ERROR_REPLY",
    "FALLBACK_REPLY",
    "Message",
    "RequestDispatcher",
    "Role",
]
