"""Chat session controller.

Owns the explicit UI state {conversation, draft, pending}. The UI reads
from it and mutates it only through the operations below.
"""

from collections.abc import Callable
from typing import Any

from ..llm import LLMProvider
from .dispatcher import RequestDispatcher
from .models import Message
from .store import ConversationStore


class ChatSession:
    """Single owner of the conversation, the draft text and the pending flag."""

    def __init__(
        self,
        llm: LLMProvider,
        system_instruction: str | None = None,
        model: str | None = None,
        **dispatcher_options: Any,
    ) -> None:
        self._store = ConversationStore()
        self._dispatcher = RequestDispatcher(
            llm,
            self._store,
            system_instruction=system_instruction,
            model=model,
            **dispatcher_options,
        )
        self._draft = ""
        self._listeners: list[Callable[[], None]] = []
        self._store.subscribe(self._notify)
        self._dispatcher.subscribe(self._notify)

    @property
    def conversation(self) -> ConversationStore:
        return self._store

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self._dispatcher

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._store.messages

    @property
    def draft(self) -> str:
        return self._draft

    @property
    def pending(self) -> bool:
        return self._dispatcher.pending

    @property
    def model(self) -> str:
        return self._dispatcher.model

    @property
    def can_submit(self) -> bool:
        """The submit control is enabled iff idle and the draft is not blank."""
        return not self.pending and bool(self._draft.strip())

    def subscribe(self, listener: Callable[[], None]) -> None:
        """Register a callback run after any state change."""
        self._listeners.append(listener)

    def set_debug_callback(self, callback: Any) -> None:
        self._dispatcher.set_debug_callback(callback)

    def set_draft(self, text: str) -> None:
        if text == self._draft:
            return
        self._draft = text
        self._notify()

    async def submit(self) -> Message | None:
        """Send the current draft. No-op when the submit control is disabled."""
        if not self.can_submit:
            return None
        text = self._draft
        self._draft = ""
        self._notify()
        return await self._dispatcher.send(text)

    def clear(self) -> None:
        """Clear the conversation. An in-flight request keeps running."""
        self._store.clear()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
