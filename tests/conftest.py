import json

import httpx
import pytest
import pytest_asyncio

from gemini_client import GeminiClient

BASE_URL = "https://gemini.test/v1beta"


class FakeGemini:
    """Replays queued responses and records every request it receives."""

    def __init__(self):
        self.responses = []
        self.requests = []

    def queue(self, *responses):
        self.responses.extend(responses)

    def bodies(self):
        return [json.loads(request.content) for request in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_api():
    return FakeGemini()


@pytest_asyncio.fixture
async def client(fake_api):
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_api)) as http_client:
        yield GeminiClient(api_key="test-key", base_url=BASE_URL, http_client=http_client)
