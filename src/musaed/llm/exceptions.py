"""Provider-neutral error types.

Providers translate SDK-specific failures into these so callers never
depend on a particular client library's exception hierarchy.
"""


class LLMError(Exception):
    """Base class for LLM provider errors."""


class LLMConnectionError(LLMError):
    """Network or connection failure while talking to the provider."""

    def __init__(self, message: str):
        super().__init__(f"Connection error: {message}")


class LLMAPIError(LLMError):
    """The provider answered with an error status."""

    def __init__(self, message: str, status_code: int | None = None):
        msg = f"API error: {message}"
        if status_code is not None:
            msg += f" (status: {status_code})"
        super().__init__(msg)
        self.status_code = status_code


class LLMResponseError(LLMError):
    """The provider returned a payload that could not be interpreted."""

    def __init__(self, message: str):
        super().__init__(f"Malformed response: {message}")
