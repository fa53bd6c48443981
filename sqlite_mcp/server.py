"""MCP Server — wires ToolDispatch into the MCP low-level server over stdio.

Invariants:
    - list_tools and call_tool are the only handlers registered
    - SDK-side input validation disabled: the registry owns argument validation,
      so schema failures produce our envelope instead of the SDK's
    - call_tool always returns a CallToolResult built from a ToolCallResult
    - Startup diagnostics always reach stderr, whatever the log level; never stdout

Design Decisions:
    - Low-level Server over FastMCP: tool schemas come from the registry verbatim,
      not from function signatures
    - Wire translation in pure helpers (to_mcp_tool, to_mcp_result): testable
      without a running transport
"""

import sys
from typing import Any

import mcp.server.stdio
import mcp.types as types
from mcp.server.lowlevel import Server

from sqlite_mcp.config import Settings
from sqlite_mcp.core.tool_result import ToolCallResult
from sqlite_mcp.services.tool_dispatch import ToolDispatch


def to_mcp_tool(entry: dict[str, Any]) -> types.Tool:
    return types.Tool(
        name=entry["name"],
        description=entry["description"],
        inputSchema=entry["inputSchema"],
    )


def to_mcp_result(result: ToolCallResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[
            types.TextContent(type="text", text=block.text)
            for block in result.content
        ],
        isError=result.is_error,
    )


def build_server(dispatch: ToolDispatch, settings: Settings) -> Server:
    """Create the MCP server with discovery + invocation handlers bound to dispatch."""
    server = Server(settings.server_name, version=settings.server_version)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return [to_mcp_tool(entry) for entry in dispatch.list_tools()]

    @server.call_tool(validate_input=False)
    async def handle_call_tool(
        name: str, arguments: dict[str, Any] | None,
    ) -> types.CallToolResult:
        result = await dispatch.execute(name, arguments)
        return to_mcp_result(result)

    return server


def announce_startup(database_path: str) -> None:
    """Ready message for whoever launched the process. Not subject to log_level."""
    print("SQLite MCP Server running on stdio", file=sys.stderr)
    print(f"Database path: {database_path}", file=sys.stderr)


async def run_stdio(server: Server, database_path: str) -> None:
    """Serve MCP over this process's stdin/stdout until the client disconnects."""
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        announce_startup(database_path)
        await server.run(
            read_stream, write_stream, server.create_initialization_options(),
        )
