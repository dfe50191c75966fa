"""Errors raised by the Gemini client.

Every failure of a client call surfaces as a ``GeminiError`` subclass. None of
them is retried by the client; the caller decides whether to repeat the call.
"""

from typing import Any


class GeminiError(Exception):
    """Base exception for Gemini client errors."""


class NetworkError(GeminiError):
    """Raised when the HTTP request could not be completed.

    The underlying ``httpx`` exception is available as ``__cause__``.
    """


class ApiError(GeminiError):
    """Raised when the API answers with a non-success status code."""

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        code: int | None = None,
        status: str | None = None,
        details: list[dict[str, Any]] | None = None,
        body: str = "",
    ):
        super().__init__(f"API error {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.code = code
        self.status = status
        self.details = details or []
        self.body = body


class DeserializationError(GeminiError):
    """Raised when a response body does not match the expected schema."""

    def __init__(self, message: str, body: str):
        super().__init__(message)
        self.body = body


class FunctionCallError(GeminiError):
    """Base for failures while dispatching a model-requested function call."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class UnknownFunctionError(FunctionCallError):
    """Raised when the model calls a function with no registered handler."""

    def __init__(self, name: str):
        super().__init__(name, f"Unknown function: {name}")


class HandlerError(FunctionCallError):
    """Raised when a function handler fails."""

    def __init__(self, name: str, message: str):
        super().__init__(name, f"Function {name} failed: {message}")
        self.handler_message = message
