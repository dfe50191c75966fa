"""
Tests for gemini_client/models/gemini.py
"""

import pytest
from pydantic import ValidationError

from gemini_client.models import (
    Content,
    DynamicRetrievalConfig,
    FunctionCall,
    FunctionCallPart,
    FunctionDeclaration,
    FunctionDeclarationsTool,
    FunctionParameters,
    FunctionResponsePart,
    GenerateContentRequest,
    GenerateContentResponse,
    GenerationConfig,
    GoogleSearchRetrieval,
    GoogleSearchRetrievalTool,
    InlineDataPart,
    ParameterProperty,
    SystemInstruction,
    TextPart,
)


def weather_declaration():
    return FunctionDeclaration(
        name="get_current_weather",
        description="Get the current weather in a given location",
        parameters=FunctionParameters(
            type="OBJECT",
            properties={
                "location": ParameterProperty(
                    type="string", description="The city and state, e.g. 'San Francisco, CA'"
                ),
                "unit": ParameterProperty(
                    type="string", description="Temperature unit", enum=["celsius", "fahrenheit"]
                ),
            },
            required=["location"],
        ),
    )


def test_request_serializes_to_wire_format():
    request = GenerateContentRequest(
        contents=[Content(role="user", parts=[TextPart(text="Weather in Belvoir?")])],
        tools=[
            GoogleSearchRetrievalTool(
                googleSearchRetrieval=GoogleSearchRetrieval(
                    dynamicRetrievalConfig=DynamicRetrievalConfig(
                        mode="MODE_DYNAMIC", dynamicThreshold=0.5
                    )
                )
            )
        ],
    )

    assert request.model_dump(mode="json", exclude_none=True) == {
        "contents": [{"role": "user", "parts": [{"text": "Weather in Belvoir?"}]}],
        "tools": [
            {
                "googleSearchRetrieval": {
                    "dynamicRetrievalConfig": {"mode": "MODE_DYNAMIC", "dynamicThreshold": 0.5}
                }
            }
        ],
    }


def test_request_round_trip():
    request = GenerateContentRequest(
        contents=[
            Content(role="user", parts=[TextPart(text="What's the weather?")]),
            Content(
                role="model",
                parts=[
                    TextPart(text="Let me check."),
                    FunctionCallPart(
                        functionCall=FunctionCall(
                            name="get_current_weather", args={"location": "Grantham, UK"}
                        )
                    ),
                ],
            ),
        ],
        systemInstruction=SystemInstruction(parts=[TextPart(text="Be brief.")]),
        generationConfig=GenerationConfig(
            temperature=0.2,
            maxOutputTokens=256,
            responseModalities=["TEXT"],
            responseLogprobs=True,
            logprobs=3,
            enableEnhancedCivicAnswers=False,
            speechConfig={"voiceConfig": {"prebuiltVoiceConfig": {"voiceName": "Kore"}}},
            mediaResolution="MEDIA_RESOLUTION_LOW",
        ),
        tools=[FunctionDeclarationsTool(functionDeclarations=[weather_declaration()])],
    )

    wire = request.model_dump(mode="json", exclude_none=True)

    assert GenerateContentRequest.model_validate(wire) == request
    assert wire["generationConfig"]["responseModalities"] == ["TEXT"]
    assert wire["generationConfig"]["mediaResolution"] == "MEDIA_RESOLUTION_LOW"
    assert wire["generationConfig"]["speechConfig"]["voiceConfig"]["prebuiltVoiceConfig"] == {
        "voiceName": "Kore"
    }
    assert wire["tools"][0]["functionDeclarations"][0]["parameters"]["required"] == ["location"]
    assert wire["tools"][0]["functionDeclarations"][0]["parameters"]["properties"]["unit"][
        "enum"
    ] == ["celsius", "fahrenheit"]


def test_response_round_trip():
    wire = {
        "candidates": [
            {
                "content": {
                    "role": "model",
                    "parts": [
                        {"text": "Calling a tool."},
                        {"functionCall": {"name": "lookup", "args": {"q": "x"}}},
                    ],
                },
                "finishReason": "STOP",
                "index": 0,
                "safetyRatings": [
                    {"category": "HARM_CATEGORY_HARASSMENT", "probability": "NEGLIGIBLE"}
                ],
            }
        ],
        "usageMetadata": {"promptTokenCount": 5, "candidatesTokenCount": 7, "totalTokenCount": 12},
        "modelVersion": "gemini-1.5-flash-002",
    }

    response = GenerateContentResponse.model_validate(wire)

    assert response.model_dump(mode="json", exclude_none=True) == wire


def test_parts_are_parsed_by_payload_key():
    content = Content.model_validate(
        {
            "role": "user",
            "parts": [
                {"text": "Describe this"},
                {"inlineData": {"mimeType": "image/png", "data": "iVBORw0KGgo="}},
                {"functionResponse": {"name": "f", "response": {"content": 1}}},
            ],
        }
    )

    assert [type(part) for part in content.parts] == [
        TextPart,
        InlineDataPart,
        FunctionResponsePart,
    ]


def test_part_with_two_payloads_is_rejected():
    with pytest.raises(ValidationError):
        Content.model_validate(
            {
                "role": "model",
                "parts": [{"text": "hi", "functionCall": {"name": "f", "args": {}}}],
            }
        )


def test_part_without_payload_is_rejected():
    with pytest.raises(ValidationError):
        Content.model_validate({"role": "model", "parts": [{}]})


def test_non_payload_keys_are_ignored():
    content = Content.model_validate(
        {"role": "model", "parts": [{"text": "thinking...", "thought": True}]}
    )

    assert content.parts == [TextPart(text="thinking...")]


def test_required_must_be_declared_property():
    with pytest.raises(ValidationError, match="required names not in properties: date"):
        FunctionParameters(
            properties={"location": ParameterProperty(type="string")},
            required=["location", "date"],
        )


def test_nested_array_parameter():
    parameters = FunctionParameters(
        properties={
            "attendees": ParameterProperty(
                type="array",
                description="People to invite",
                items=ParameterProperty(type="string"),
            )
        },
        required=["attendees"],
    )

    assert parameters.model_dump(exclude_none=True)["properties"]["attendees"]["items"] == {
        "type": "string"
    }


def test_tool_with_two_configurations_is_rejected():
    with pytest.raises(ValidationError):
        GenerateContentRequest.model_validate(
            {
                "contents": [],
                "tools": [{"functionDeclarations": [], "googleSearch": {}}],
            }
        )


def test_models_are_immutable():
    part = TextPart(text="hello")

    with pytest.raises(ValidationError):
        part.text = "changed"


def test_with_turn_leaves_original_request_untouched():
    request = GenerateContentRequest(contents=[Content(role="user", parts=[TextPart(text="hi")])])
    turn = Content(role="model", parts=[TextPart(text="hello")])

    extended = request.with_turn(turn)

    assert len(request.contents) == 1
    assert extended.contents == [*request.contents, turn]


def test_response_accessors():
    response = GenerateContentResponse.model_validate(
        {
            "candidates": [
                {
                    "content": {
                        "parts": [
                            {"functionCall": {"name": "lookup", "args": {}}},
                            {"text": "done"},
                        ]
                    }
                }
            ]
        }
    )

    assert response.function_call == FunctionCall(name="lookup", args={})
    assert response.text == "done"


def test_empty_response_accessors():
    response = GenerateContentResponse.model_validate(
        {"candidates": [{"finishReason": "SAFETY"}]}
    )

    assert response.first_part is None
    assert response.function_call is None
    assert response.text is None
    assert GenerateContentResponse().first_part is None


def test_null_function_call_args_parse_as_empty():
    part = Content.model_validate(
        {"role": "model", "parts": [{"functionCall": {"name": "f", "args": None}}]}
    ).parts[0]

    assert part == FunctionCallPart(functionCall=FunctionCall(name="f", args={}))
