"""Conversation configuration constants.

Centralizes the fixed user-facing strings of the request lifecycle.
"""

# Substituted when the model answers without any text
FALLBACK_REPLY = "عذراً، لم أتمكن من معالجة طلبك."

# Appended as a model reply when a request fails for any reason
ERROR_REPLY = "حدث خطأ أثناء الاتصال بالذكاء الاصطناعي. يرجى المحاولة مرة أخرى."

# Characters of user text echoed into debug traces
TRACE_PREVIEW_LENGTH = 50
