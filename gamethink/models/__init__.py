"""Data models for the tracker and its transports."""
from .internal import (
    ThoughtRecord,
    ThoughtSummary,
    FailureSummary,
    Valid,
    Invalid,
    ValidationOutcome,
)
from .protocol import (
    TextContent,
    ToolDefinition,
    ToolListResponse,
    ToolCallRequest,
    ToolCallResponse,
)

__all__ = [
    "ThoughtRecord",
    "ThoughtSummary",
    "FailureSummary",
    "Valid",
    "Invalid",
    "ValidationOutcome",
    "TextContent",
    "ToolDefinition",
    "ToolListResponse",
    "ToolCallRequest",
    "ToolCallResponse",
]
