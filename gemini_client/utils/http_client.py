"""HTTP client utilities."""

import httpx

from gemini_client.config import settings


async def post_request(
    url: str,
    headers: dict[str, str],
    json_data: dict | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> httpx.Response:
    """Make a POST request.

    Uses ``http_client`` when given, otherwise a short-lived client.
    """
    if http_client is not None:
        return await http_client.post(url, headers=headers, json=json_data)
    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        response = await client.post(url, headers=headers, json=json_data)
        return response


async def get_request(
    url: str,
    headers: dict[str, str],
    params: dict[str, str] | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> httpx.Response:
    """Make a GET request."""
    if http_client is not None:
        return await http_client.get(url, headers=headers, params=params)
    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        response = await client.get(url, headers=headers, params=params)
        return response
