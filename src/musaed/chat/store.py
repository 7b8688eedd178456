"""Conversation store.

Hides how the ordered message sequence is held and how observers learn
about changes. The sequence only grows, or is cleared wholesale.
"""

from collections.abc import Callable, Iterator

from .models import Message

StoreListener = Callable[[], None]


class ConversationStore:
    """Append-only ordered sequence of messages.

    `generation` advances on every clear, so a caller that remembers it can
    tell whether the conversation it started with still exists.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._generation = 0
        self._listeners: list[StoreListener] = []

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of the conversation in insertion order."""
        return tuple(self._messages)

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_empty(self) -> bool:
        return not self._messages

    def last(self) -> Message | None:
        return self._messages[-1] if self._messages else None

    def append(self, message: Message) -> None:
        """Add a message at the end. No deduplication, no size cap."""
        self._messages.append(message)
        self._notify()

    def clear(self) -> None:
        """Drop every message. Safe to call on an empty store."""
        self._messages.clear()
        self._generation += 1
        self._notify()

    def subscribe(self, listener: StoreListener) -> None:
        """Register a callback run after every append or clear."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
