"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Input history management
- Chat message rendering and auto-scroll
- Welcome panel and thinking indicator visibility
- Log rendering and level filtering
"""

from collections.abc import Sequence
from datetime import datetime

from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click, Paste
from textual.message import Message
from textual.widgets import Button, Input, LoadingIndicator, Markdown, RichLog, Static

from ..chat.models import Message as ConversationMessage
from ..chat.models import Role
from .config import (
    APP_SUBTITLE,
    APP_TITLE,
    CLEAR_TOOLTIP,
    COPIED_NOTICE,
    INPUT_HISTORY_MAX_SIZE,
    INPUT_PLACEHOLDER,
    LOADING_TEXT,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    ROLE_STYLES,
    SEND_LABEL,
    WELCOME_BODY,
    WELCOME_HEADING,
    WELCOME_ICON,
    LogLevel,
)
from .formatting import format_message_header, truncate


class TitleBar(Horizontal):
    """Top bar with the app title, the model name and the clear control."""

    def __init__(self, model_name: str = "", *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._model_name = model_name

    def compose(self):
        with Vertical(id="title-text"):
            yield Static(APP_TITLE, id="app-title")
            subtitle = APP_SUBTITLE
            if self._model_name:
                subtitle = f"{APP_SUBTITLE} • {self._model_name}"
            yield Static(subtitle, id="app-subtitle")
        yield Button("🗑", id="clear-btn").with_tooltip(f"{CLEAR_TOOLTIP} (Ctrl+K)")


class ClickableMessage(Vertical):
    """A chat message container that copies its raw text when clicked."""

    def __init__(self, content: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._content = content

    @property
    def content(self) -> str:
        return self._content

    def on_click(self, event: Click) -> None:
        event.stop()
        self.app.copy_to_clipboard(self._content)
        self.app.notify(COPIED_NOTICE, timeout=2)


class WelcomePanel(Vertical):
    """Static panel shown while the conversation is empty."""

    def compose(self):
        yield Static(WELCOME_ICON, id="welcome-icon")
        yield Static(WELCOME_HEADING, id="welcome-heading")
        yield Static(WELCOME_BODY, id="welcome-body")


class ThinkingIndicator(Horizontal):
    """Transient row shown after the last message while a request is pending."""

    def compose(self):
        yield LoadingIndicator(id="thinking-spinner")
        yield Static(LOADING_TEXT, id="thinking-text")


class HistoryInput(Input):
    """Single-line input with command history support.

    Use Up/Down arrow keys to navigate through history.
    Multi-line pastes are converted to single line (newlines become spaces).
    """

    BINDINGS = [
        Binding("up", "history_previous", "Previous", show=False),
        Binding("down", "history_next", "Next", show=False),
    ]

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1
        self._current_input: str = ""

    @property
    def history(self) -> list[str]:
        return list(self._history)

    def _on_paste(self, event: Paste) -> None:
        if event.text:
            self.insert_text_at_cursor(" ".join(event.text.split()))
            event.prevent_default()
            event.stop()

    def action_history_previous(self) -> None:
        if not self._history:
            return
        if self._history_index == -1:
            self._current_input = self.value
            self._history_index = len(self._history) - 1
        elif self._history_index > 0:
            self._history_index -= 1
        self.value = self._history[self._history_index]
        self.cursor_position = len(self.value)

    def action_history_next(self) -> None:
        if self._history_index == -1:
            return
        if self._history_index < len(self._history) - 1:
            self._history_index += 1
            self.value = self._history[self._history_index]
        else:
            self._history_index = -1
            self.value = self._current_input
        self.cursor_position = len(self.value)

    def add_to_history(self, command: str) -> None:
        """Add a submitted line to history, skipping immediate repeats."""
        if command and (not self._history or self._history[-1] != command):
            self._history.append(command)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1
        self._current_input = ""


class ChatInputBar(Horizontal):
    """Chat input bar with a single-line input and a Send button.

    Enter in the input or a press on Send posts SubmitRequested; whether the
    submission is accepted is decided by the app.
    """

    class DraftChanged(Message):
        """Posted whenever the input text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class SubmitRequested(Message):
        """Posted when the user asks to send the current draft."""

    def compose(self):
        yield HistoryInput(placeholder=INPUT_PLACEHOLDER, id="chat-input")
        yield Button(SEND_LABEL, id="send-btn", variant="success", disabled=True).with_tooltip(
            "Enter"
        )

    @property
    def input(self) -> HistoryInput:
        return self.query_one("#chat-input", HistoryInput)

    @property
    def send_button(self) -> Button:
        return self.query_one("#send-btn", Button)

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.DraftChanged(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(self.SubmitRequested())

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self.post_message(self.SubmitRequested())

    def sync(self, draft: str, can_submit: bool) -> None:
        """Mirror the session: input text and Send button state."""
        text_input = self.input
        if text_input.value != draft:
            text_input.value = draft
        self.send_button.disabled = not can_submit

    def remember(self, value: str) -> None:
        self.input.add_to_history(value)

    def focus_input(self) -> None:
        """Focus the text input."""
        self.input.focus()


class DebugPanel(RichLog):
    """Log panel for request tracing with level filtering.

    Hidden by default, shown with --log-level or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Dispatch": "green",
    }

    def __init__(self, *args, log_level: LogLevel = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level
        self._entries: list[str] = []

    @property
    def log_level(self) -> LogLevel:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: LogLevel) -> None:
        self._log_level = level
        self._update_subtitle()

    @property
    def entries(self) -> list[str]:
        """Plain-text lines accepted so far."""
        return list(self._entries)

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {self._log_level.name}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        self.display = False

    def write_entry(
        self,
        component: str,
        message: str,
        level: LogLevel = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold."""
        if level < self._log_level:
            return

        from rich.markup import escape

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        message = truncate(message, LOG_MAX_MESSAGE_LENGTH)
        self._entries.append(f"{timestamp} {level.name:<7} [{component}] {message}")

        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")
        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{level.name:<7}[/] "
            f"[{comp_color}]\\[{component}][/] {escape(message)}"
        )

    def info(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.INFO)

    def error(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self._update_subtitle()

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
        else:
            self.show()
        return bool(self.display)


class ChatHistoryWidget(VerticalScroll):
    """Scrollable conversation view.

    Renders the session's messages in order, keeps the welcome panel and the
    thinking indicator in sync with the conversation and pending flag, and
    scrolls to the newest entry whenever the sequence changes.
    """

    BORDER_TITLE = "المحادثة"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._rendered: list[tuple[ConversationMessage, ClickableMessage]] = []
        self._welcome = WelcomePanel(id="welcome")
        self._thinking = ThinkingIndicator(id="thinking")

    def compose(self):
        yield self._welcome
        yield self._thinking

    def on_mount(self) -> None:
        self._thinking.display = False

    @property
    def rendered_ids(self) -> list[str]:
        return [msg.id for msg, _ in self._rendered]

    @property
    def is_thinking(self) -> bool:
        return bool(self._thinking.display)

    @property
    def is_welcome_visible(self) -> bool:
        return bool(self._welcome.display)

    def get_last_response(self) -> str | None:
        """Raw text of the newest model message on screen."""
        for msg, widget in reversed(self._rendered):
            if msg.role is Role.MODEL:
                return widget.content
        return None

    def sync(self, messages: Sequence[ConversationMessage], pending: bool) -> None:
        """Bring the view in line with the conversation and pending flag."""
        ids = [msg.id for msg in messages]
        changed = False

        if self.rendered_ids != ids[:len(self._rendered)]:
            # The conversation was cleared (and possibly refilled)
            for _, widget in self._rendered:
                widget.remove()
            self._rendered.clear()
            changed = True

        for msg in messages[len(self._rendered):]:
            widget = self._render_message(msg)
            self.mount(widget, before=self._thinking)
            self._rendered.append((msg, widget))
            changed = True

        empty = not messages
        self._welcome.display = empty
        thinking = pending and not empty
        if thinking != self.is_thinking:
            self._thinking.display = thinking
            changed = True

        if changed:
            self.border_subtitle = f"{len(messages)} رسالة" if messages else ""
            self.call_after_refresh(self.scroll_end, animate=False)

    def _render_message(self, msg: ConversationMessage) -> ClickableMessage:
        style = ROLE_STYLES[msg.role]
        container = ClickableMessage(content=msg.text, classes=f"chat-message {style.css_class}")
        container.compose_add_child(Static(format_message_header(msg), classes="message-header"))
        container.compose_add_child(Markdown(msg.text, classes="message-content"))
        return container
