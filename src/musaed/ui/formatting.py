"""Text formatting utilities for the TUI.

Pure functions mapping conversation data to display text.
"""

from datetime import datetime

from ..chat.models import Message
from .config import ROLE_STYLES

_ARABIC_INDIC_DIGITS = str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩")


def to_arabic_digits(text: str) -> str:
    """Replace Western digits with Arabic-Indic ones."""
    return text.translate(_ARABIC_INDIC_DIGITS)


def format_message_time(timestamp: datetime) -> str:
    """Format a time the way the ar-EG locale shows 2-digit hour and minute.

    Twelve-hour clock with Arabic-Indic digits and a ص (AM) / م (PM) suffix,
    e.g. 15:05 -> "٠٣:٠٥ م".
    """
    hour = timestamp.hour % 12 or 12
    suffix = "ص" if timestamp.hour < 12 else "م"
    return f"{to_arabic_digits(f'{hour:02d}:{timestamp.minute:02d}')} {suffix}"


def format_message_header(message: Message) -> str:
    """Header line shown above a message: icon, author and time."""
    style = ROLE_STYLES[message.role]
    return f"{style.icon} {style.label}  [dim]{format_message_time(message.timestamp)}[/dim]"


def truncate(text: str, limit: int) -> str:
    """Shorten text for one-line displays."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
