"""Gemini adapter."""

import httpx

from gemini_client.config import settings
from gemini_client.utils.http_client import get_request, post_request


class GeminiAdapter:
    """Raw HTTP access to the Gemini REST API.

    Returns ``httpx.Response`` objects untouched; status handling and parsing
    belong to the caller.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key
        self.base_url = (base_url or settings.gemini_base_url).rstrip("/")
        self.http_client = http_client

    def _get_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
        }

    def _get_url(self, model: str) -> str:
        return f"{self.base_url}/models/{model}:generateContent?key={self.api_key}"

    async def generate_content(self, model: str, request_data: dict) -> httpx.Response:
        """Send generate content request."""
        url = self._get_url(model)
        return await post_request(url, self._get_headers(), request_data, self.http_client)

    async def list_models(self, page_token: str | None = None) -> httpx.Response:
        """Fetch one page of the models listing."""
        params = {"key": self.api_key, "pageSize": "1000"}
        if page_token:
            params["pageToken"] = page_token
        return await get_request(
            f"{self.base_url}/models", self._get_headers(), params, self.http_client
        )
