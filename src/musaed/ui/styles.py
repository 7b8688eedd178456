"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout:
- Title bar docked at the top
- Conversation filling the middle, debug log below it when shown
- Input bar and disclaimer docked at the bottom
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Title Bar
   ============================================ */
TitleBar {
    dock: top;
    height: 4;
    padding: 0 2;
    background: $surface;
    border-bottom: solid $border;
}

#title-text {
    width: 1fr;
    height: 100%;
    padding: 0;
}

#app-title {
    color: $primary;
    text-style: bold;
}

#app-subtitle {
    color: $text-muted;
}

#clear-btn {
    width: 6;
    min-width: 6;
    height: 3;
    background: transparent;
    border: none;
    color: $text-muted;

    &:hover {
        color: $error;
        background: $error 10%;
    }
}

/* ============================================
   Conversation
   ============================================ */
#chat-history {
    height: 1fr;
    padding: 1 2;
    background: $background;
    border: none;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    scrollbar-gutter: stable;
}

WelcomePanel {
    width: 100%;
    height: auto;
    align: center middle;
    content-align: center middle;
    padding: 4 0;
}

#welcome-icon {
    width: 100%;
    text-align: center;
    margin-bottom: 1;
}

#welcome-heading {
    width: 100%;
    text-align: center;
    text-style: bold;
    color: $foreground;
    margin-bottom: 1;
}

#welcome-body {
    width: 100%;
    text-align: center;
    color: $text-muted;
}

.chat-message {
    width: 85%;
    height: auto;
    margin: 0 0 1 0;
    padding: 1 2;
}

/* User messages: indigo bubble on one side */
.user-message {
    background: $secondary 15%;
    border-right: tall $secondary;

    & .message-header {
        color: $secondary;
        text-style: bold;
        text-align: right;
    }

    &:hover {
        background: $secondary 22%;
    }
}

/* Model replies: emerald bubble on the other side */
.model-message {
    offset-x: 15%;
    background: $surface;
    border-left: tall $primary;

    & .message-header {
        color: $primary;
        text-style: bold;
    }

    &:hover {
        background: $primary 8%;
    }
}

.message-header {
    height: auto;
}

.message-content {
    height: auto;
    margin: 0;
    padding: 0;
    background: transparent;
}

ThinkingIndicator {
    width: 85%;
    height: 3;
    offset-x: 15%;
    padding: 0 2;
    background: $surface;
    border-left: tall $primary;
}

#thinking-spinner {
    width: 8;
    height: 1;
    margin-top: 1;
    background: transparent;
    color: $primary;
}

#thinking-text {
    width: 1fr;
    margin-top: 1;
    color: $text-muted;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
}

/* ============================================
   Bottom Bar - Input + Disclaimer
   ============================================ */
#bottom-bar {
    dock: bottom;
    height: auto;
    padding: 1 2 0 2;
    background: $surface;
    border-top: solid $border;
}

ChatInputBar {
    height: 3;
}

#chat-input {
    width: 1fr;
    border: tall $border;
    background: $panel;

    &:focus {
        border: tall $primary;
    }
}

#send-btn {
    width: 12;
    margin: 0 0 0 1;
    text-style: bold;

    &:disabled {
        background: $panel;
        color: $text-disabled;
        border: tall $border;
    }
}

#disclaimer {
    width: 100%;
    height: 1;
    text-align: center;
    color: $text-muted;
}

Footer {
    background: $surface;
}
"""
