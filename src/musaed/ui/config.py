"""UI configuration constants.

Centralizes the user-facing strings, the role presentation table and the
log level scale used by the UI module.
"""

from dataclasses import dataclass
from enum import IntEnum

from ..chat.models import Role


class LogLevel(IntEnum):
    """Log levels for the debug panel.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR.
    Lower value = more verbose.
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls.__members__.get(level_str.strip().upper(), cls.DEBUG)


@dataclass(frozen=True)
class RoleStyle:
    """How messages of one role are presented."""

    label: str
    icon: str
    css_class: str


ROLE_STYLES: dict[Role, RoleStyle] = {
    Role.USER: RoleStyle(label="أنت", icon="👤", css_class="user-message"),
    Role.MODEL: RoleStyle(label="المساعد", icon="🤖", css_class="model-message"),
}

# Header
APP_TITLE = "مساعد جيميناي"
APP_SUBTITLE = "الذكاء الاصطناعي العربي"
CLEAR_TOOLTIP = "مسح المحادثة"

# Empty conversation
WELCOME_ICON = "✨"
WELCOME_HEADING = "كيف يمكنني مساعدتك اليوم؟"
WELCOME_BODY = "أنا هنا للإجابة على أسئلتك، مساعدتك في الكتابة، أو حتى مجرد الدردشة."

# Pending request
LOADING_TEXT = "جاري التفكير..."

# Input area
INPUT_PLACEHOLDER = "اكتب رسالتك هنا..."
SEND_LABEL = "إرسال"
DISCLAIMER = "يعمل بواسطة نموذج جيميناي • قد يقدم الذكاء الاصطناعي معلومات غير دقيقة أحياناً"

# Notifications
CLEARED_NOTICE = "تم مسح المحادثة"
COPIED_NOTICE = "تم النسخ"
NOTHING_TO_COPY_NOTICE = "لا يوجد رد لنسخه"
LOG_SHOWN_NOTICE = "تم إظهار سجل التتبع"
LOG_HIDDEN_NOTICE = "تم إخفاء سجل التتبع"

# Input history configuration
INPUT_HISTORY_MAX_SIZE = 100

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500
