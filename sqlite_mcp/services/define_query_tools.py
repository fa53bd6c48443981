"""Define Query Tools — schemas for the three SQL-bearing tools.

Invariants:
    - Every tool here carries a `query` string and is gated by statement kind
    - Order is the discovery order: read_query, write_query, create_table

Design Decisions:
    - Tool definitions in dedicated files: explicit, no auto-discovery
    - Descriptions name the accepted statement kind so the agent picks the right tool
"""

from sqlite_mcp.core.domain_types import ToolName
from sqlite_mcp.schemas.tool_args import (
    CreateTableArgs, ReadQueryArgs, WriteQueryArgs,
)
from sqlite_mcp.services.tool_definition import ToolDefinition

TOOLS_QUERY = [
    ToolDefinition(
        name=ToolName.READ_QUERY,
        description="Execute a SELECT query on the SQLite database",
        args_model=ReadQueryArgs,
    ),
    ToolDefinition(
        name=ToolName.WRITE_QUERY,
        description="Execute an INSERT, UPDATE, or DELETE query on the SQLite database",
        args_model=WriteQueryArgs,
    ),
    ToolDefinition(
        name=ToolName.CREATE_TABLE,
        description="Create a new table in the SQLite database",
        args_model=CreateTableArgs,
    ),
]
