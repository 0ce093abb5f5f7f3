"""Tool definition and call dispatch."""
import threading
from typing import Any, Dict, List

from gamethink.config import AppConfig, ToolConfig
from gamethink.core.formatter import ThoughtFormatter
from gamethink.core.tracker import ThoughtTracker
from gamethink.models.protocol import ToolCallResponse, ToolDefinition
from gamethink.utils.logging import get_logger

logger = get_logger(__name__)


INPUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "thought": {"type": "string", "description": "Current game design/implementation thought"},
        "nextThoughtNeeded": {"type": "boolean", "description": "If more steps are needed"},
        "thoughtNumber": {"type": "integer", "minimum": 1, "description": "Current step number"},
        "totalThoughts": {"type": "integer", "minimum": 1, "description": "Estimated total steps"},
        "isRevision": {"type": "boolean", "description": "If revising previous thought"},
        "revisesThought": {"type": "integer", "minimum": 1, "description": "Thought being revised"},
        "branchFromThought": {"type": "integer", "minimum": 1, "description": "Branching point"},
        "branchId": {"type": "string", "description": "Branch identifier"},
        "gameComponent": {"type": "string", "description": "Game component being designed"},
        "libraryUsed": {"type": "string", "description": "Library being used"},
    },
    "required": ["thought", "nextThoughtNeeded", "thoughtNumber", "totalThoughts"],
}


def build_tracker(config: AppConfig) -> ThoughtTracker:
    """Create a fresh tracker from configuration."""
    return ThoughtTracker(
        formatter=ThoughtFormatter(margin=config.formatter.margin),
        render=config.formatter.enabled,
    )


def build_tool_definition(config: ToolConfig) -> ToolDefinition:
    return ToolDefinition(
        name=config.name,
        description=config.description,
        inputSchema=INPUT_SCHEMA,
    )


class ToolDispatcher:
    """Route tool calls to the tracker, one call at a time."""

    def __init__(self, tracker: ThoughtTracker, config: ToolConfig):
        """Initialize with the tracker that owns the thought history."""
        self.tracker = tracker
        self.tool = build_tool_definition(config)
        self._lock = threading.Lock()

    def list_tools(self) -> List[ToolDefinition]:
        return [self.tool]

    def call_tool(self, name: str, arguments: Any) -> ToolCallResponse:
        """Dispatch a call; unknown names yield an error response."""
        if name != self.tool.name:
            logger.warning("unknown_tool", tool=name)
            return ToolCallResponse.text(f"Unknown tool: {name}", is_error=True)

        with self._lock:
            return self.tracker.record_thought(arguments)
