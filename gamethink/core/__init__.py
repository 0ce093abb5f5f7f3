"""Core thought tracking logic."""
from .formatter import ThoughtFormatter
from .tracker import ThoughtTracker, validate_thought_data
from .tools import ToolDispatcher, build_tool_definition, build_tracker

__all__ = [
    "ThoughtFormatter",
    "ThoughtTracker",
    "validate_thought_data",
    "ToolDispatcher",
    "build_tool_definition",
    "build_tracker",
]
