"""Tests for the MCP stdio server handlers."""
import asyncio
import io
import json

import mcp.types as types
import pytest

from gamethink.config import AppConfig, ToolConfig
from gamethink.core import ThoughtTracker, ToolDispatcher
from gamethink.mcp_server import create_server


@pytest.fixture
def tracker():
    return ThoughtTracker(diagnostics=io.StringIO())


@pytest.fixture
def server(tracker):
    config = AppConfig()
    return create_server(ToolDispatcher(tracker, config.tool), config)


def list_tools(server):
    handler = server.request_handlers[types.ListToolsRequest]
    return asyncio.run(handler(types.ListToolsRequest())).root


def call_tool(server, name, arguments):
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    return asyncio.run(handler(request)).root


def test_list_tools(server):
    """Test that exactly one tool is advertised."""
    result = list_tools(server)

    assert [tool.name for tool in result.tools] == ["gamedesignthinking"]
    schema = result.tools[0].inputSchema
    assert schema["properties"]["thoughtNumber"]["minimum"] == 1
    assert "gameComponent" in schema["properties"]


def test_call_records_thought(server, tracker):
    """Test a successful call."""
    result = call_tool(server, "gamedesignthinking", {
        "thought": "Add jump mechanic",
        "thoughtNumber": 1,
        "totalThoughts": 3,
        "nextThoughtNeeded": True,
    })

    assert result.isError is False
    assert json.loads(result.content[0].text) == {
        "thoughtNumber": 1,
        "totalThoughts": 3,
        "nextThoughtNeeded": True,
        "branches": [],
        "thoughtHistoryLength": 1,
    }
    assert tracker.history_length == 1


def test_call_uses_runtime_validation(server, tracker):
    """Test that the tracker's messages are returned, not schema errors."""
    result = call_tool(server, "gamedesignthinking", {
        "thought": "Tune gravity",
        "thoughtNumber": 1,
        "totalThoughts": 1,
        "nextThoughtNeeded": "yes",
    })

    assert result.isError is True
    assert json.loads(result.content[0].text) == {
        "error": "Invalid nextThoughtNeeded: must be a boolean",
        "status": "failed",
    }
    assert tracker.history_length == 0


def test_call_without_arguments(server):
    """Test a call with no arguments at all."""
    result = call_tool(server, "gamedesignthinking", None)

    assert result.isError is True
    assert json.loads(result.content[0].text)["error"] == "Invalid thought: must be a string"


def test_unknown_tool(server, tracker):
    """Test that an unknown tool is an error result, not an exception."""
    result = call_tool(server, "sequentialthinking", {"thought": "x"})

    assert result.isError is True
    assert result.content[0].text == "Unknown tool: sequentialthinking"
    assert tracker.history_length == 0


def test_custom_tool_name(tracker):
    """Test that the tool name follows configuration."""
    config = AppConfig(tool=ToolConfig(name="leveldesign"))
    server = create_server(ToolDispatcher(tracker, config.tool), config)

    assert [tool.name for tool in list_tools(server).tools] == ["leveldesign"]
    result = call_tool(server, "gamedesignthinking", {})
    assert result.content[0].text == "Unknown tool: gamedesignthinking"


def test_tool_description_guides_usage(server):
    """Test that the advertised description carries examples and guidance."""
    description = list_tools(server).tools[0].description

    assert '* "Create Three.js scene with basic lighting"' in description
    assert "You should:" in description
    assert description.endswith("8. Iterate until game design is complete")
