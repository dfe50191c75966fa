"""Gemini API models.

Field names follow the REST wire format (camelCase), so ``model_dump`` output
is the request body and ``model_validate`` accepts the response body as-is.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    field_validator,
    model_validator,
)

Role = Literal["user", "model", "function", "tool"]


class WireModel(BaseModel):
    """Immutable base for all wire models."""

    model_config = ConfigDict(frozen=True)


def _single_key(value: Any, keys: tuple[str, ...]) -> str | None:
    """Return the only key of ``keys`` carried by ``value``, else None."""
    if isinstance(value, dict):
        present = [key for key in keys if value.get(key) is not None]
    else:
        present = [key for key in keys if getattr(value, key, None) is not None]
    return present[0] if len(present) == 1 else None


def _check_required(properties: dict[str, Any] | None, required: list[str] | None):
    missing = [name for name in required or [] if name not in (properties or {})]
    if missing:
        raise ValueError(f"required names not in properties: {', '.join(missing)}")


# ============ Parts ============


class FunctionCall(WireModel):
    """Function call requested by the model."""

    name: str
    args: dict[str, Any] = Field(default_factory=dict)

    @field_validator("args", mode="before")
    @classmethod
    def _null_args(cls, value):
        return {} if value is None else value


class FunctionResponse(WireModel):
    """Result of a function call, sent back to the model."""

    name: str
    response: dict[str, Any]


class Blob(WireModel):
    """Inline bytes, base64 encoded."""

    mimeType: str
    data: str


class FileData(WireModel):
    """Reference to an uploaded file."""

    mimeType: str
    fileUri: str


class ExecutableCode(WireModel):
    """Code generated by the model for execution."""

    language: str = "PYTHON"
    code: str


class CodeExecutionResult(WireModel):
    """Outcome of executing generated code."""

    outcome: str
    output: str | None = None


class TextPart(WireModel):
    """Text part."""

    text: str


class FunctionCallPart(WireModel):
    """Function call part (in model response)."""

    functionCall: FunctionCall


class FunctionResponsePart(WireModel):
    """Function response part (in function turn)."""

    functionResponse: FunctionResponse


class InlineDataPart(WireModel):
    """Inline data part."""

    inlineData: Blob


class FileDataPart(WireModel):
    """File data part."""

    fileData: FileData


class ExecutableCodePart(WireModel):
    """Executable code part (in model response)."""

    executableCode: ExecutableCode


class CodeExecutionResultPart(WireModel):
    """Code execution result part (in model response)."""

    codeExecutionResult: CodeExecutionResult


PART_KEYS = (
    "text",
    "functionCall",
    "functionResponse",
    "inlineData",
    "fileData",
    "executableCode",
    "codeExecutionResult",
)


def _part_kind(value: Any) -> str | None:
    return _single_key(value, PART_KEYS)


Part = Annotated[
    Union[
        Annotated[TextPart, Tag("text")],
        Annotated[FunctionCallPart, Tag("functionCall")],
        Annotated[FunctionResponsePart, Tag("functionResponse")],
        Annotated[InlineDataPart, Tag("inlineData")],
        Annotated[FileDataPart, Tag("fileData")],
        Annotated[ExecutableCodePart, Tag("executableCode")],
        Annotated[CodeExecutionResultPart, Tag("codeExecutionResult")],
    ],
    Discriminator(
        _part_kind,
        custom_error_type="invalid_part",
        custom_error_message="A part must carry exactly one payload",
    ),
]


class Content(WireModel):
    """Content with parts."""

    role: Role
    parts: list[Part]


class SystemInstruction(WireModel):
    """System instruction."""

    parts: list[TextPart]


# ============ Tools ============


class ParameterProperty(WireModel):
    """Schema of a single function parameter."""

    type: str
    description: str | None = None
    enum: list[str] | None = None
    items: "ParameterProperty | None" = None
    properties: "dict[str, ParameterProperty] | None" = None
    required: list[str] | None = None

    @model_validator(mode="after")
    def _required_subset(self):
        _check_required(self.properties, self.required)
        return self


class FunctionParameters(WireModel):
    """Object schema describing a function's arguments."""

    type: str = "object"
    properties: dict[str, ParameterProperty] = Field(default_factory=dict)
    required: list[str] | None = None

    @model_validator(mode="after")
    def _required_subset(self):
        _check_required(self.properties, self.required)
        return self


class FunctionDeclaration(WireModel):
    """Function declaration."""

    name: str
    description: str | None = None
    parameters: FunctionParameters | None = None


class DynamicRetrievalConfig(WireModel):
    """When search grounding kicks in."""

    mode: str = "MODE_DYNAMIC"
    dynamicThreshold: float


class GoogleSearchRetrieval(WireModel):
    """Search retrieval configuration."""

    dynamicRetrievalConfig: DynamicRetrievalConfig


class FunctionDeclarationsTool(WireModel):
    """Tool exposing local functions to the model."""

    functionDeclarations: list[FunctionDeclaration] = Field(default_factory=list)


class GoogleSearchRetrievalTool(WireModel):
    """Search grounding with dynamic retrieval (1.5 models)."""

    googleSearchRetrieval: GoogleSearchRetrieval


class GoogleSearchTool(WireModel):
    """Built-in search grounding (2.x models)."""

    googleSearch: dict[str, Any] = Field(default_factory=dict)


class CodeExecutionTool(WireModel):
    """Built-in code execution."""

    codeExecution: dict[str, Any] = Field(default_factory=dict)


TOOL_KEYS = (
    "functionDeclarations",
    "googleSearchRetrieval",
    "googleSearch",
    "codeExecution",
)


def _tool_kind(value: Any) -> str | None:
    return _single_key(value, TOOL_KEYS)


ToolConfig = Annotated[
    Union[
        Annotated[FunctionDeclarationsTool, Tag("functionDeclarations")],
        Annotated[GoogleSearchRetrievalTool, Tag("googleSearchRetrieval")],
        Annotated[GoogleSearchTool, Tag("googleSearch")],
        Annotated[CodeExecutionTool, Tag("codeExecution")],
    ],
    Discriminator(
        _tool_kind,
        custom_error_type="invalid_tool",
        custom_error_message="A tool must carry exactly one configuration",
    ),
]


# ============ Request Models ============


class GenerationConfig(WireModel):
    """Generation configuration."""

    temperature: float | None = None
    topP: float | None = None
    topK: int | None = None
    maxOutputTokens: int | None = None
    stopSequences: list[str] | None = None
    candidateCount: int | None = None
    responseMimeType: str | None = None
    responseSchema: dict[str, Any] | None = None
    seed: int | None = None
    presencePenalty: float | None = None
    frequencyPenalty: float | None = None
    responseModalities: list[str] | None = None
    responseLogprobs: bool | None = None
    logprobs: int | None = None
    enableEnhancedCivicAnswers: bool | None = None
    speechConfig: dict[str, Any] | None = None
    thinkingConfig: dict[str, Any] | None = None
    mediaResolution: str | None = None


class GenerateContentRequest(WireModel):
    """Gemini generate content request."""

    contents: list[Content]
    systemInstruction: SystemInstruction | None = None
    generationConfig: GenerationConfig | None = None
    tools: list[ToolConfig] | None = None

    def with_turn(self, content: Content) -> "GenerateContentRequest":
        """Return a copy of this request with one more conversation turn."""
        return self.model_copy(update={"contents": [*self.contents, content]})


# ============ Response Models ============


class UsageMetadata(WireModel):
    """Usage metadata."""

    promptTokenCount: int | None = None
    candidatesTokenCount: int | None = None
    totalTokenCount: int | None = None


class SafetyRating(WireModel):
    """Safety rating."""

    category: str
    probability: str
    blocked: bool | None = None


class ResponseContent(WireModel):
    """Response content."""

    parts: list[Part] = Field(default_factory=list)
    role: Role = "model"


class Candidate(WireModel):
    """Response candidate."""

    content: ResponseContent = Field(default_factory=ResponseContent)
    finishReason: str | None = None
    safetyRatings: list[SafetyRating] | None = None
    index: int = 0
    groundingMetadata: dict[str, Any] | None = None
    citationMetadata: dict[str, Any] | None = None


class GenerateContentResponse(WireModel):
    """Gemini generate content response."""

    candidates: list[Candidate] | None = None
    usageMetadata: UsageMetadata | None = None
    promptFeedback: dict[str, Any] | None = None
    modelVersion: str | None = None

    @property
    def first_part(self) -> Part | None:
        """First part of the first candidate, if any."""
        if not self.candidates or not self.candidates[0].content.parts:
            return None
        return self.candidates[0].content.parts[0]

    @property
    def function_call(self) -> FunctionCall | None:
        part = self.first_part
        if isinstance(part, FunctionCallPart):
            return part.functionCall
        return None

    @property
    def text(self) -> str | None:
        """Concatenated text of the first candidate."""
        if not self.candidates:
            return None
        texts = [p.text for p in self.candidates[0].content.parts if isinstance(p, TextPart)]
        return "".join(texts) if texts else None


# ============ Models listing ============


class Model(WireModel):
    """Model metadata returned by the models endpoint."""

    name: str
    baseModelId: str | None = None
    version: str | None = None
    displayName: str | None = None
    description: str | None = None
    inputTokenLimit: int | None = None
    outputTokenLimit: int | None = None
    supportedGenerationMethods: list[str] = Field(default_factory=list)
    temperature: float | None = None
    topP: float | None = None
    topK: int | None = None


class ListModelsResponse(WireModel):
    """One page of the models listing."""

    models: list[Model] = Field(default_factory=list)
    nextPageToken: str | None = None


# ============ Errors ============


class ErrorDetail(WireModel):
    """Error detail."""

    code: int | None = None
    message: str = ""
    status: str | None = None
    details: list[dict[str, Any]] | None = None


class ErrorResponse(WireModel):
    """Error body returned with non-success status codes."""

    error: ErrorDetail
