"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

Emerald is the assistant's accent, indigo the user's.
"""

from textual.theme import Theme

MUSAED_LIGHT = Theme(
    name="musaed-light",
    primary="#10b981",      # Emerald 500 - assistant, send button
    secondary="#4f46e5",    # Indigo 600 - user messages
    accent="#6366f1",       # Indigo 500 - inline code, links
    foreground="#1a1a1a",
    background="#f8f9fa",
    success="#10b981",
    warning="#d97706",
    error="#ef4444",
    surface="#ffffff",
    panel="#eef0f2",
    dark=False,
    variables={
        "border": "#e2e4e7",
        "border-blurred": "#eceef0",

        "text-muted": "#8a8a8a",
        "text-disabled": "#c4c4c4",

        "input-cursor-background": "#10b981",
        "input-cursor-foreground": "#ffffff",
        "input-selection-background": "#10b981 25%",

        "scrollbar": "#e2e4e7",
        "scrollbar-hover": "#c9ccd1",
        "scrollbar-active": "#10b981",
        "scrollbar-background": "#f8f9fa",

        "footer-background": "#ffffff",
        "footer-key-foreground": "#10b981",
        "footer-description-foreground": "#6b6b6b",

        "link-color": "#4f46e5",
    },
)

MUSAED_DARK = Theme(
    name="musaed-dark",
    primary="#34d399",      # Emerald 400
    secondary="#818cf8",    # Indigo 400
    accent="#a5b4fc",
    foreground="#e5e7eb",
    background="#0f1115",
    success="#34d399",
    warning="#fbbf24",
    error="#f87171",
    surface="#181b21",
    panel="#1f232b",
    dark=True,
    variables={
        "border": "#2a2f38",
        "text-muted": "#8b93a1",
        "text-disabled": "#4b5260",
        "scrollbar-active": "#34d399",
        "footer-key-foreground": "#34d399",
    },
)

THEMES = (MUSAED_LIGHT, MUSAED_DARK)
