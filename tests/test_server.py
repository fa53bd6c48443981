"""MCP Server wiring — tests for wire translation and handler registration.

Tests cover:
    - Discovery entries translate to mcp.types.Tool without loss
    - Envelopes translate to CallToolResult with isError preserved
    - build_server registers list_tools and call_tool handlers
    - list_tools handler returns all five tools
    - Startup message reaches stderr even when the log level hides INFO
    - Installed mcp SDK is the 1.x line the low-level decorators come from
"""

import logging
from importlib.metadata import version

import mcp.types as types
import pytest

from sqlite_mcp.config import Settings
from sqlite_mcp.core.errors import UnknownToolError
from sqlite_mcp.core.tool_result import ToolCallResult
from sqlite_mcp.server import (
    announce_startup, build_server, to_mcp_result, to_mcp_tool,
)


@pytest.mark.asyncio
async def test_to_mcp_tool_is_lossless(dispatch):
    for entry in dispatch.list_tools():
        tool = to_mcp_tool(entry)
        assert tool.name == entry["name"]
        assert tool.description == entry["description"]
        assert tool.inputSchema == entry["inputSchema"]


def test_to_mcp_result_success():
    result = to_mcp_result(ToolCallResult.from_text("Table created successfully"))
    assert result.isError is False
    assert result.content[0].type == "text"
    assert result.content[0].text == "Table created successfully"


def test_to_mcp_result_error():
    result = to_mcp_result(ToolCallResult.from_error(UnknownToolError("x")))
    assert result.isError is True
    assert result.content[0].text == "Error: Unknown tool: x"


@pytest.mark.asyncio
async def test_build_server_registers_handlers(dispatch):
    server = build_server(dispatch, Settings())
    assert types.ListToolsRequest in server.request_handlers
    assert types.CallToolRequest in server.request_handlers


@pytest.mark.asyncio
async def test_list_tools_handler_returns_five_tools(dispatch):
    server = build_server(dispatch, Settings())
    handler = server.request_handlers[types.ListToolsRequest]
    response = await handler(types.ListToolsRequest(method="tools/list"))
    names = [t.name for t in response.root.tools]
    assert names == [
        "read_query", "write_query", "create_table", "list_tables", "describe_table",
    ]


def test_announce_startup_ignores_log_level(capsys, monkeypatch):
    monkeypatch.setattr(logging.root, "level", logging.WARNING)
    announce_startup("/data/app.db")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "SQLite MCP Server running on stdio" in captured.err
    assert "Database path: /data/app.db" in captured.err


def test_mcp_sdk_is_1x():
    assert version("mcp").split(".")[0] == "1"
