"""Define Schema Tools — catalog introspection tools.

Invariants:
    - No SQL text accepted from the agent: list_tables has no inputs,
      describe_table takes an identifier checked against IDENTIFIER_PATTERN
"""

from sqlite_mcp.core.domain_types import ToolName
from sqlite_mcp.schemas.tool_args import DescribeTableArgs, ListTablesArgs
from sqlite_mcp.services.tool_definition import ToolDefinition

TOOLS_SCHEMA = [
    ToolDefinition(
        name=ToolName.LIST_TABLES,
        description="List all tables in the SQLite database",
        args_model=ListTablesArgs,
    ),
    ToolDefinition(
        name=ToolName.DESCRIBE_TABLE,
        description="Get the schema information for a specific table",
        args_model=DescribeTableArgs,
    ),
]
