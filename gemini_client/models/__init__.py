"""Models module."""

from gemini_client.models.gemini import (
    Blob,
    Candidate,
    CodeExecutionResult,
    CodeExecutionResultPart,
    CodeExecutionTool,
    Content,
    DynamicRetrievalConfig,
    ErrorDetail,
    ErrorResponse,
    ExecutableCode,
    ExecutableCodePart,
    FileData,
    FileDataPart,
    FunctionCall,
    FunctionCallPart,
    FunctionDeclaration,
    FunctionDeclarationsTool,
    FunctionParameters,
    FunctionResponse,
    FunctionResponsePart,
    GenerateContentRequest,
    GenerateContentResponse,
    GenerationConfig,
    GoogleSearchRetrieval,
    GoogleSearchRetrievalTool,
    GoogleSearchTool,
    InlineDataPart,
    ListModelsResponse,
    Model,
    ParameterProperty,
    Part,
    ResponseContent,
    Role,
    SafetyRating,
    SystemInstruction,
    TextPart,
    ToolConfig,
    UsageMetadata,
)

__all__ = [
    "Blob",
    "Candidate",
    "CodeExecutionResult",
    "CodeExecutionResultPart",
    "CodeExecutionTool",
    "Content",
    "DynamicRetrievalConfig",
    "ErrorDetail",
    "ErrorResponse",
    "ExecutableCode",
    "ExecutableCodePart",
    "FileData",
    "FileDataPart",
    "FunctionCall",
    "FunctionCallPart",
    "FunctionDeclaration",
    "FunctionDeclarationsTool",
    "FunctionParameters",
    "FunctionResponse",
    "FunctionResponsePart",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "GenerationConfig",
    "GoogleSearchRetrieval",
    "GoogleSearchRetrievalTool",
    "GoogleSearchTool",
    "InlineDataPart",
    "ListModelsResponse",
    "Model",
    "ParameterProperty",
    "Part",
    "ResponseContent",
    "Role",
    "SafetyRating",
    "SystemInstruction",
    "TextPart",
    "ToolConfig",
    "UsageMetadata",
]
