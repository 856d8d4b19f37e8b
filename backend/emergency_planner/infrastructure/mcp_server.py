"""MCP Server — stdio transport adapter around ToolDispatch.

Invariants:
    - tools/list publishes ALL_TOOLS verbatim (name, description, inputSchema)
    - tools/call always answers with a CallToolResult; isError mirrors the envelope flag
    - One ThinkingSession per server process, owned by the ToolDispatch built here
    - Nothing is written to stdout except protocol frames

Design Decisions:
    - Low-level mcp Server over FastMCP: tools are declared as JSON-schema dicts and
      routed by ToolDispatch, not by decorated signatures
    - SDK input validation disabled: ToolDispatch is the single validator, so
      sequentialthinking can answer malformed steps with its own JSON error body
"""

import logging

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from emergency_planner.config import Settings
from emergency_planner.core.thinking_session import ThinkingSession
from emergency_planner.services.tool_dispatch import ToolDispatch
from emergency_planner.services.tools_registry import ALL_TOOLS

logger = logging.getLogger(__name__)


def to_mcp_tools(tools: list[dict]) -> list[types.Tool]:
    """Catalog dicts -> MCP Tool objects."""
    return [
        types.Tool(
            name=t["name"],
            description=t["description"],
            inputSchema=t["input_schema"],
        )
        for t in tools
    ]


def to_call_tool_result(envelope: dict) -> types.CallToolResult:
    """Uniform envelope -> MCP CallToolResult."""
    return types.CallToolResult(
        content=[
            types.TextContent(type="text", text=block["text"])
            for block in envelope["content"]
        ],
        isError=bool(envelope.get("isError", False)),
    )


def build_server(settings: Settings, dispatch: ToolDispatch | None = None) -> Server:
    """Create the MCP server with tools/list and tools/call registered."""
    dispatch = dispatch or ToolDispatch(
        ThinkingSession(), maps_api_key=settings.google_maps_api_key,
    )
    server = Server(settings.server_name, version=settings.server_version)
    mcp_tools = to_mcp_tools(ALL_TOOLS)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return mcp_tools

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict | None) -> types.CallToolResult:
        return to_call_tool_result(await dispatch.execute(name, arguments))

    return server


async def serve(settings: Settings) -> None:
    """Run the server over stdin/stdout until the client disconnects."""
    server = build_server(settings)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Emergency Medicare Planner MCP Server running on stdio")
        await server.run(
            read_stream, write_stream, server.create_initialization_options(),
        )
