"""Local dispatch of model-requested function calls."""

import copy
import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic_core import PydanticSerializationError, to_jsonable_python

from gemini_client.errors import HandlerError, UnknownFunctionError
from gemini_client.models.gemini import (
    Content,
    FunctionCall,
    FunctionResponse,
    FunctionResponsePart,
)

logger = logging.getLogger(__name__)

# A handler takes the call's arguments and returns a JSON-shaped result, or
# raises to report failure. Coroutine functions are awaited.
FunctionHandler = Callable[[dict[str, Any]], Any]
FunctionHandlers = Mapping[str, FunctionHandler]


def resolve_handler(call: FunctionCall, handlers: FunctionHandlers) -> FunctionHandler:
    """Look up the handler registered for ``call``."""
    handler = handlers.get(call.name)
    if handler is None:
        raise UnknownFunctionError(call.name)
    return handler


async def invoke_handler(call: FunctionCall, handler: FunctionHandler) -> Any:
    """Run ``handler`` on a copy of the call's arguments.

    Returns the result in JSON-compatible form.
    """
    logger.debug("Dispatching function call %s", call.name)
    try:
        result = handler(copy.deepcopy(call.args))
        if inspect.isawaitable(result):
            result = await result
    except Exception as exc:
        raise HandlerError(call.name, str(exc)) from exc
    try:
        return to_jsonable_python(result)
    except PydanticSerializationError as exc:
        raise HandlerError(call.name, f"result is not JSON serializable: {exc}") from exc


def function_response_turn(call: FunctionCall, result: Any) -> Content:
    """Build the turn that reports ``result`` back to the model."""
    return Content(
        role="function",
        parts=[
            FunctionResponsePart(
                functionResponse=FunctionResponse(
                    name=call.name,
                    response={"content": result},
                )
            )
        ],
    )
