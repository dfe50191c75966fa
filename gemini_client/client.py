"""Gemini API client."""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from gemini_client.adapters.gemini_adapter import GeminiAdapter
from gemini_client.config import settings
from gemini_client.errors import ApiError, DeserializationError, NetworkError
from gemini_client.functions import (
    FunctionHandlers,
    function_response_turn,
    invoke_handler,
    resolve_handler,
)
from gemini_client.models.gemini import (
    ErrorResponse,
    GenerateContentRequest,
    GenerateContentResponse,
    ListModelsResponse,
    Model,
)

logger = logging.getLogger(__name__)

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class GeminiClient:
    """Client for the Gemini ``generateContent`` API.

    The API key defaults to the ``GEMINI_API_KEY`` setting. Pass an
    ``httpx.AsyncClient`` to control proxies, timeouts or transports;
    otherwise every call opens its own connection.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        api_key = api_key or settings.gemini_api_key
        if not api_key:
            raise ValueError("No API key given and GEMINI_API_KEY is not set")
        self.adapter = GeminiAdapter(api_key, base_url, http_client)

    async def generate(
        self, model: str, request: GenerateContentRequest
    ) -> GenerateContentResponse:
        """Send one generateContent request and parse the response."""
        request_data = request.model_dump(mode="json", exclude_none=True)
        logger.debug("generateContent model=%s turns=%d", model, len(request.contents))
        try:
            response = await self.adapter.generate_content(model, request_data)
        except httpx.RequestError as exc:
            raise NetworkError(f"generateContent request failed: {exc}") from exc
        return _parse(response, GenerateContentResponse)

    async def generate_with_function_calling(
        self,
        model: str,
        request: GenerateContentRequest,
        handlers: FunctionHandlers,
    ) -> GenerateContentResponse:
        """Generate, answering a function call in the reply with one follow-up.

        Only the first part of the first candidate is inspected. When it is a
        function call, its handler runs and the result goes back to the model
        in a single extra request. Function calls in that second reply are
        returned to the caller as they are.
        """
        response = await self.generate(model, request)
        call = response.function_call
        if call is None:
            return response

        handler = resolve_handler(call, handlers)
        result = await invoke_handler(call, handler)
        follow_up = request.with_turn(function_response_turn(call, result))
        return await self.generate(model, follow_up)

    async def list_models(self) -> list[Model]:
        """List all models available to this API key."""
        models: list[Model] = []
        page_token = None
        while True:
            try:
                response = await self.adapter.list_models(page_token)
            except httpx.RequestError as exc:
                raise NetworkError(f"models request failed: {exc}") from exc
            page = _parse(response, ListModelsResponse)
            models.extend(page.models)
            page_token = page.nextPageToken
            if not page_token:
                break

        return [
            model.model_copy(update={"baseModelId": model.name.removeprefix("models/")})
            for model in models
        ]


def _parse(response: httpx.Response, model_cls: type[ResponseModel]) -> ResponseModel:
    """Raise for error statuses, otherwise validate the body into ``model_cls``."""
    logger.debug("Gemini responded with status %d", response.status_code)
    if not response.is_success:
        raise _api_error(response)
    try:
        return model_cls.model_validate_json(response.content)
    except ValidationError as exc:
        logger.warning("Could not parse Gemini response: %s", exc)
        raise DeserializationError(
            f"Unexpected response body: {exc}", response.text
        ) from exc


def _api_error(response: httpx.Response) -> ApiError:
    body = response.text
    logger.warning("Gemini API error %d: %s", response.status_code, body[:500])
    try:
        detail = ErrorResponse.model_validate_json(body).error
    except ValidationError:
        return ApiError(response.status_code, body or response.reason_phrase, body=body)
    return ApiError(
        response.status_code,
        detail.message or response.reason_phrase,
        code=detail.code,
        status=detail.status,
        details=detail.details,
        body=body,
    )
