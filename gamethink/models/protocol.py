"""Tool-invocation protocol envelopes."""
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field
import time


class TextContent(BaseModel):
    """A text content block."""
    type: Literal["text"] = "text"
    text: str


class ToolDefinition(BaseModel):
    """Advertised shape of a callable tool."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    input_schema: Dict[str, Any] = Field(alias="inputSchema")


class ToolListResponse(BaseModel):
    """Response for tool listing."""
    tools: List[ToolDefinition]


class ToolCallRequest(BaseModel):
    """A single tool invocation."""
    name: str
    # Untrusted, re-validated by the tracker
    arguments: Any = None


class ToolCallResponse(BaseModel):
    """Result of a tool invocation."""
    model_config = ConfigDict(populate_by_name=True)

    content: List[TextContent]
    is_error: Optional[bool] = Field(default=None, alias="isError")

    @classmethod
    def text(cls, text: str, is_error: bool = False) -> "ToolCallResponse":
        """Build a single-block response; isError is only set on failure."""
        return cls(content=[TextContent(text=text)], is_error=True if is_error else None)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ErrorResponse(BaseModel):
    """Error response."""
    error: Dict[str, Any]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    server: str
    tool: str
    thought_history_length: int
    timestamp: int = Field(default_factory=lambda: int(time.time()))
