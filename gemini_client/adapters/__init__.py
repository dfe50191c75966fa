"""Adapters module."""

from gemini_client.adapters.gemini_adapter import GeminiAdapter

__all__ = ["GeminiAdapter"]
