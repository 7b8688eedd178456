"""Main Textual TUI application.

Orchestrates the UI components around an explicit ChatSession. The app
never holds conversation state itself: every event is turned into a session
operation, and every session change is rendered back by _refresh_view.
"""

import asyncio
import contextlib

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Button, Footer, Static

from ..chat import ChatSession
from ..llm import LLMProvider
from .config import (
    CLEARED_NOTICE,
    COPIED_NOTICE,
    DISCLAIMER,
    LOG_HIDDEN_NOTICE,
    LOG_SHOWN_NOTICE,
    NOTHING_TO_COPY_NOTICE,
    LogLevel,
)
from .styles import APP_CSS
from .themes import MUSAED_DARK, MUSAED_LIGHT, THEMES
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, TitleBar


class MusaedApp(App):
    """Textual chat client for the Gemini assistant."""

    CSS = APP_CSS
    TITLE = "Musaed"

    BINDINGS = [
        # Priority: the focused input binds ctrl+k and ctrl+d for editing
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+k", "clear_chat", "Clear Chat", priority=True),
        Binding("ctrl+r", "copy_last_response", "Copy Response", priority=True),
        Binding("ctrl+d", "toggle_debug", "Debug", priority=True),
        Binding("ctrl+t", "toggle_dark", "Theme", priority=True),
    ]

    def __init__(self, session: ChatSession, log_level: str | None = None) -> None:
        super().__init__()
        self._session = session
        self._log_level = log_level

    @property
    def session(self) -> ChatSession:
        return self._session

    def compose(self) -> ComposeResult:
        yield TitleBar(model_name=self._session.model, id="title-bar")
        yield ChatHistoryWidget(id="chat-history")
        yield DebugPanel(id="debug-panel")
        with Vertical(id="bottom-bar"):
            yield ChatInputBar(id="chat-input-bar")
            yield Static(DISCLAIMER, id="disclaimer")
        yield Footer()

    def on_mount(self) -> None:
        for theme in THEMES:
            self.register_theme(theme)
        self.theme = MUSAED_LIGHT.name

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._session.set_debug_callback(self._route_debug)
        self._session.subscribe(self._refresh_view)
        self._refresh_view()
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route debug messages from the session to the log panel."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        log_panel.write_entry(component, message, LogLevel.from_string(level))

    def _refresh_view(self) -> None:
        """Render the session state: messages, pending indicator, submit control."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        chat.sync(self._session.messages, self._session.pending)
        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        input_bar.sync(self._session.draft, self._session.can_submit)

    def on_chat_input_bar_draft_changed(self, event: ChatInputBar.DraftChanged) -> None:
        self._session.set_draft(event.value)

    def on_chat_input_bar_submit_requested(self, event: ChatInputBar.SubmitRequested) -> None:
        """Handle Enter / Send. Ignored while pending or with a blank draft."""
        if not self._session.can_submit:
            return
        self.query_one("#chat-input-bar", ChatInputBar).remember(self._session.draft.strip())
        self._dispatch()

    @work(group="dispatch")
    async def _dispatch(self) -> None:
        """Run the request as a background async worker.

        Not exclusive: an in-flight request is never cancelled, and the
        session itself rejects a second submit while one is pending.
        """
        await self._session.submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "clear-btn":
            self.action_clear_chat()

    def action_clear_chat(self) -> None:
        """Clear the conversation."""
        self._session.clear()
        self.notify(CLEARED_NOTICE, timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last model reply to clipboard."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        response = chat.get_last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify(COPIED_NOTICE, timeout=2)
        else:
            self.notify(NOTHING_TO_COPY_NOTICE, severity="warning", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(LOG_SHOWN_NOTICE if is_visible else LOG_HIDDEN_NOTICE, timeout=2)

    def action_toggle_dark(self) -> None:
        """Switch between the light and dark palettes."""
        if self.theme == MUSAED_LIGHT.name:
            self.theme = MUSAED_DARK.name
        else:
            self.theme = MUSAED_LIGHT.name


async def run_textual_tui(
    llm: LLMProvider,
    model: str | None = None,
    system_instruction: str | None = None,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        llm: LLM provider instance
        model: Model identifier (None uses the provider's default)
        system_instruction: Override for the packaged system prompt
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    session = ChatSession(llm, system_instruction=system_instruction, model=model)
    app = MusaedApp(session, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        with contextlib.suppress(Exception):
            await llm.close()
