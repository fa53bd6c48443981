"""Tool Dispatch — explicit routing from tool_name to handler function.

Invariants:
    - Every tool->handler mapping is visible — no getattr magic, no auto-discovery
    - execute() never raises: every path returns a well-formed ToolCallResult
    - Unknown tools, invalid arguments and gated statements become error envelopes
      before any database access
    - Every tool call logged (tool name, error code, duration) for observability
    - No state retained between calls; the gateway is injected and owned by the caller

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
    - Split handlers by concern: query tools vs schema tools
    - Catch-all at this boundary only: handlers and gateway raise typed errors,
      the dispatcher turns anything that escapes into an envelope
"""

import logging
import time
from typing import Any

from sqlite_mcp.core.errors import SqliteMcpError, UnknownToolError
from sqlite_mcp.core.tool_result import ToolCallResult
from sqlite_mcp.infrastructure.database import SqliteGateway
from sqlite_mcp.services.handle_query import QueryHandlers
from sqlite_mcp.services.handle_schema import SchemaHandlers
from sqlite_mcp.services.tools_registry import (
    get_tool, list_tools, validate_arguments,
)

logger = logging.getLogger(__name__)


class ToolDispatch:
    """Routes tool_name -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, db: SqliteGateway):
        self._db = db
        query = QueryHandlers(db)
        schema = SchemaHandlers(db)

        # ADR: every mapping explicit — adding a tool requires editing this dict
        self._handlers = {
            "read_query": query.read_query,
            "write_query": query.write_query,
            "create_table": query.create_table,
            "list_tables": schema.list_tables,
            "describe_table": schema.describe_table,
        }

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    def list_tools(self) -> list[dict[str, Any]]:
        """Discovery payload: [{name, description, inputSchema}] in registry order."""
        return [tool.to_discovery() for tool in list_tools()]

    async def execute(self, tool_name: str, arguments: Any) -> ToolCallResult:
        """Resolve, validate, gate, run. Returns an envelope; never raises."""
        started = time.perf_counter()
        result = await self._execute(tool_name, arguments)
        self._log_tool_call(tool_name, result, started)
        return result

    async def _execute(self, tool_name: str, arguments: Any) -> ToolCallResult:
        try:
            tool = get_tool(tool_name)
            handler = self._handlers.get(tool_name)
            if tool is None or handler is None:
                return ToolCallResult.from_error(UnknownToolError(tool_name))

            args, error = validate_arguments(tool, arguments)
            if error:
                return ToolCallResult.from_error(error)

            return await handler(args)
        except SqliteMcpError as e:
            return ToolCallResult.from_error(e)
        except Exception as e:
            logger.error(
                f"Unhandled exception in tool '{tool_name}': {e}",
                exc_info=True, extra={"tool_name": tool_name},
            )
            return ToolCallResult.from_unexpected(e)

    def _log_tool_call(
        self, tool_name: str, result: ToolCallResult, started: float,
    ) -> None:
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        extra = {
            "tool_name": tool_name,
            "error_code": result.error_code,
            "duration_ms": duration_ms,
        }
        if result.is_error:
            logger.info(f"Tool '{tool_name}' failed: {result.text}", extra=extra)
        else:
            logger.info(f"Tool '{tool_name}' succeeded", extra=extra)
