"""MCP stdio server exposing the game design thinking tool."""
import asyncio
import sys
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from gamethink.config import AppConfig, app_config, settings
from gamethink.core import ToolDispatcher, build_tracker
from gamethink.models.protocol import ToolCallResponse
from gamethink.utils import setup_logging, get_logger

logger = get_logger(__name__)


def to_call_tool_result(response: ToolCallResponse) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=block.text) for block in response.content],
        isError=bool(response.is_error),
    )


def create_server(dispatcher: ToolDispatcher, config: Optional[AppConfig] = None) -> Server:
    """Build an MCP server that routes tool calls to ``dispatcher``."""
    config = config or app_config
    server = Server(config.server.name, version=config.server.version)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.input_schema,
            )
            for tool in dispatcher.list_tools()
        ]

    # The tracker does its own runtime validation with per-field messages
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> types.CallToolResult:
        return to_call_tool_result(dispatcher.call_tool(name, arguments))

    return server


async def serve(config: Optional[AppConfig] = None) -> None:
    """Serve a fresh tracker over stdio until the client disconnects."""
    config = config or app_config
    tracker = build_tracker(config)
    server = create_server(ToolDispatcher(tracker, config.tool), config)

    async with stdio_server() as (read_stream, write_stream):
        logger.info("mcp_server_running", transport="stdio", server=config.server.name, tool=config.tool.name)
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    setup_logging(settings.log_level, settings.log_format)
    try:
        asyncio.run(serve())
    except Exception as e:
        logger.exception("fatal_error", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
