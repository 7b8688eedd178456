"""Request dispatcher.

Hides how the conversation is turned into a provider request, and how the
single in-flight request moves between the IDLE and AWAITING_RESPONSE states.
"""

from collections.abc import Callable
from typing import Any

from ..llm import LLMProvider
from ..llm.models import ChatMessage
from ..prompts import get_system_instruction
from .config import ERROR_REPLY, FALLBACK_REPLY, TRACE_PREVIEW_LENGTH
from .models import DispatchState, Message, Role
from .store import ConversationStore

# Provider-neutral role names for each conversation role
_LLM_ROLES = {
    Role.USER: "user",
    Role.MODEL: "assistant",
}


class RequestDispatcher:
    """Sends the conversation to the model, one request at a time.

    Hidden design decisions:
    - Serialization of the history into ChatMessage records
    - The fixed system instruction attached to every request
    - Collapsing every failure into one user-facing error reply
    - Discarding replies that arrive after the conversation was cleared
    """

    def __init__(
        self,
        llm: LLMProvider,
        store: ConversationStore,
        system_instruction: str | None = None,
        model: str | None = None,
        fallback_reply: str = FALLBACK_REPLY,
        error_reply: str = ERROR_REPLY,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            llm: Provider the conversation is sent to
            store: Conversation the dispatcher appends to
            system_instruction: Directive sent with every request
                (default: the packaged 'system' prompt)
            model: Model identifier (default: the provider's default)
            fallback_reply: Text used when the reply carries no text
            error_reply: Text appended when the request fails
        """
        self._llm = llm
        self._store = store
        self._system_instruction = (
            system_instruction if system_instruction is not None else get_system_instruction()
        )
        self._model = model or llm.model
        self._fallback_reply = fallback_reply
        self._error_reply = error_reply
        self._state = DispatchState.IDLE
        self._listeners: list[Callable[[], None]] = []
        self._debug_callback: Any | None = None

    @property
    def state(self) -> DispatchState:
        return self._state

    @property
    def pending(self) -> bool:
        """True while a request is in flight."""
        return self._state is DispatchState.AWAITING_RESPONSE

    @property
    def model(self) -> str:
        return self._model

    @property
    def system_instruction(self) -> str:
        return self._system_instruction

    def subscribe(self, listener: Callable[[], None]) -> None:
        """Register a callback run after every state transition."""
        self._listeners.append(listener)

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for detailed execution logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Dispatch", message)

    def _set_state(self, state: DispatchState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener()
            except Exception as e:
                self._debug("error", f"State listener failed: {type(e).__name__}: {e}")

    def _append(self, message: Message) -> None:
        """Append to the store; a failing store listener is traced, not raised."""
        try:
            self._store.append(message)
        except Exception as e:
            self._debug("error", f"Store listener failed: {type(e).__name__}: {e}")

    def build_request(self) -> list[ChatMessage]:
        """Serialize the whole conversation, system instruction first."""
        messages = [ChatMessage(role="system", content=self._system_instruction)]
        messages.extend(
            ChatMessage(role=_LLM_ROLES[msg.role], content=msg.text)
            for msg in self._store
        )
        return messages

    async def send(self, text: str) -> Message | None:
        """Append `text` as a user message and await the model's reply.

        Blank text, or a call made while another request is pending, is a
        no-op. Failures never propagate: request errors become the fixed
        error reply, and listener errors are reported to the debug callback.

        Returns:
            The model message that was appended, or None when nothing was
            sent or the reply arrived after the conversation was cleared
        """
        if not text or not text.strip():
            self._debug("debug", "Ignored blank input")
            return None
        if self.pending:
            self._debug("debug", "Ignored send while a request is pending")
            return None

        self._append(Message.create(Role.USER, text))
        generation = self._store.generation
        self._set_state(DispatchState.AWAITING_RESPONSE)

        try:
            reply = Message.create(Role.MODEL, await self._request_reply(text))
            if self._store.generation != generation:
                self._debug("warning", "Conversation cleared while pending, reply discarded")
                return None
            self._append(reply)
            return reply
        finally:
            self._set_state(DispatchState.IDLE)

    async def _request_reply(self, text: str) -> str:
        """Await the model and return the text to show; never raises Exception."""
        try:
            request = self.build_request()
            self._debug(
                "info",
                f"Sending {len(request) - 1} message(s) to {self._model}: "
                f"'{text[:TRACE_PREVIEW_LENGTH]}'"
            )
            response = await self._llm.chat_completion(request, model=self._model)
            if response.has_text:
                self._debug("info", f"Reply received: {response.summary()}")
            else:
                self._debug("warning", "Reply carried no text, using fallback")
            return response.text_or(self._fallback_reply)
        except Exception as e:
            self._debug("error", f"Request failed: {type(e).__name__}: {e}")
            return self._error_reply
