"""Terminal UI module for musaed.

Provides a Textual-based chat interface; the same app is served to web
browsers by `musaed serve`.

Module structure (each module hides a design decision):
- config.py: UI strings, role presentation table, log levels
- formatting.py: pure text mappings (headers, times)
- widgets.py: custom widgets (conversation view, input bar, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes
- app.py: Application orchestration (user interaction flow)
"""

from .app import MusaedApp, run_textual_tui
from .config import ROLE_STYLES, LogLevel, RoleStyle
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, TitleBar

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "LogLevel",
    "MusaedApp",
    "ROLE_STYLES",
    "RoleStyle",
    "TitleBar",
    "run_textual_tui",
]
