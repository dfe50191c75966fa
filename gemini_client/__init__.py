"""Async client for the Gemini generateContent API."""

from gemini_client.client import GeminiClient
from gemini_client.errors import (
    ApiError,
    DeserializationError,
    FunctionCallError,
    GeminiError,
    HandlerError,
    NetworkError,
    UnknownFunctionError,
)
from gemini_client.functions import FunctionHandler, FunctionHandlers

__all__ = [
    "GeminiClient",
    "ApiError",
    "DeserializationError",
    "FunctionCallError",
    "GeminiError",
    "HandlerError",
    "NetworkError",
    "UnknownFunctionError",
    "FunctionHandler",
    "FunctionHandlers",
]
