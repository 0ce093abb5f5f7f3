"""Tests for the HTTP tool endpoints."""
import io
import json

import pytest
from fastapi.testclient import TestClient

from gamethink.config import AppConfig
from gamethink.core import ThoughtTracker
from gamethink.main import create_app


@pytest.fixture
def tracker():
    return ThoughtTracker(diagnostics=io.StringIO())


@pytest.fixture
def client(tracker):
    app = create_app(tracker=tracker, config=AppConfig())
    with TestClient(app) as client:
        yield client


def call(client, arguments, name="gamedesignthinking"):
    response = client.post("/v1/tools/call", json={"name": name, "arguments": arguments})
    assert response.status_code == 200
    return response.json()


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["tool"] == "gamedesignthinking"
    assert data["thought_history_length"] == 0


def test_tools_list(client):
    """Test tools list endpoint."""
    response = client.get("/v1/tools")
    assert response.status_code == 200
    tools = response.json()["tools"]
    assert len(tools) == 1
    assert tools[0]["name"] == "gamedesignthinking"
    assert set(tools[0]["inputSchema"]["required"]) == {
        "thought", "nextThoughtNeeded", "thoughtNumber", "totalThoughts",
    }


def test_design_session(client, tracker):
    """Test a short session with a bump and a branch."""
    first = call(client, {
        "thought": "Add jump mechanic",
        "thoughtNumber": 1,
        "totalThoughts": 3,
        "nextThoughtNeeded": True,
    })
    assert "isError" not in first
    assert first["content"][0]["type"] == "text"
    assert json.loads(first["content"][0]["text"])["thoughtHistoryLength"] == 1

    second = json.loads(call(client, {
        "thought": "Tune gravity",
        "thoughtNumber": 5,
        "totalThoughts": 3,
        "nextThoughtNeeded": True,
    })["content"][0]["text"])
    assert second["totalThoughts"] == 5
    assert second["thoughtHistoryLength"] == 2

    third = json.loads(call(client, {
        "thought": "Alt control scheme",
        "thoughtNumber": 2,
        "totalThoughts": 5,
        "nextThoughtNeeded": True,
        "branchFromThought": 1,
        "branchId": "controls-alt",
    })["content"][0]["text"])
    assert "controls-alt" in third["branches"]
    assert tracker.history_length == 3

    assert client.get("/health").json()["thought_history_length"] == 3


def test_invalid_thought(client, tracker):
    """Test error handling for a missing thought."""
    body = call(client, {"thoughtNumber": 1, "totalThoughts": 1, "nextThoughtNeeded": True})

    assert body["isError"] is True
    assert json.loads(body["content"][0]["text"]) == {
        "error": "Invalid thought: must be a string",
        "status": "failed",
    }
    assert tracker.history_length == 0


def test_unknown_tool(client, tracker):
    """Test error handling for an unknown tool name."""
    body = call(client, {"thought": "x"}, name="levelbuilder")

    assert body["isError"] is True
    assert body["content"][0]["text"] == "Unknown tool: levelbuilder"
    assert tracker.history_length == 0


def test_non_object_arguments(client):
    """Test that non-object arguments reach validation, not a crash."""
    body = call(client, ["not", "an", "object"])
    assert body["isError"] is True


def test_missing_tool_name(client):
    """Test envelope validation for a call without a name."""
    response = client.post("/v1/tools/call", json={"arguments": {}})
    assert response.status_code == 422


def test_apps_do_not_share_history():
    """Test that each app owns its own tracker."""
    payload = {
        "name": "gamedesignthinking",
        "arguments": {
            "thought": "Add jump mechanic",
            "thoughtNumber": 1,
            "totalThoughts": 1,
            "nextThoughtNeeded": False,
        },
    }
    first = TestClient(create_app(tracker=ThoughtTracker(render=False), config=AppConfig()))
    second = TestClient(create_app(tracker=ThoughtTracker(render=False), config=AppConfig()))

    first.post("/v1/tools/call", json=payload)
    first.post("/v1/tools/call", json=payload)
    text = second.post("/v1/tools/call", json=payload).json()["content"][0]["text"]

    assert json.loads(text)["thoughtHistoryLength"] == 1
