"""Schema Handlers — catalog introspection tools (2 methods).

Invariants:
    - list_tables output is [{"name": ...}] ordered by name
    - describe_table output is one object per column, in declaration order
"""

from dataclasses import asdict

from sqlite_mcp.core.domain_types import TableName
from sqlite_mcp.core.tool_result import ToolCallResult
from sqlite_mcp.infrastructure.database import SqliteGateway
from sqlite_mcp.schemas.tool_args import DescribeTableArgs, ListTablesArgs


class SchemaHandlers:
    """list_tables, describe_table."""

    def __init__(self, db: SqliteGateway):
        self.db = db

    async def list_tables(self, args: ListTablesArgs) -> ToolCallResult:
        tables = await self.db.list_tables()
        return ToolCallResult.from_value(tables)

    async def describe_table(self, args: DescribeTableArgs) -> ToolCallResult:
        columns = await self.db.describe_table(TableName(args.table_name))
        return ToolCallResult.from_value([asdict(c) for c in columns])
