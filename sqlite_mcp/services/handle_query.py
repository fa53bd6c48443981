"""Query Handlers — the three SQL-bearing tools (3 methods).

Invariants:
    - Statement gate checked first; a gated-out statement never reaches the gateway
    - read_query returns rows, write_query returns the affected-row count,
      create_table returns the literal "Table created successfully"
    - Gateway DatabaseError propagates to ToolDispatch, which owns envelope conversion

Design Decisions:
    - Handlers receive validated pydantic args, never raw dicts
    - write_query runs through execute() (row count), read_query through query() (rows)
"""

from sqlite_mcp.core.enforce_gates import (
    check_create_table_gate, check_read_gate, check_write_gate,
)
from sqlite_mcp.core.tool_result import ToolCallResult
from sqlite_mcp.infrastructure.database import SqliteGateway
from sqlite_mcp.schemas.tool_args import (
    CreateTableArgs, ReadQueryArgs, WriteQueryArgs,
)

TABLE_CREATED_MESSAGE = "Table created successfully"


class QueryHandlers:
    """read_query, write_query, create_table."""

    def __init__(self, db: SqliteGateway):
        self.db = db

    async def read_query(self, args: ReadQueryArgs) -> ToolCallResult:
        error = check_read_gate(args.query)
        if error:
            return ToolCallResult.from_error(error)
        rows = await self.db.query(args.query)
        return ToolCallResult.from_value(rows)

    async def write_query(self, args: WriteQueryArgs) -> ToolCallResult:
        error = check_write_gate(args.query)
        if error:
            return ToolCallResult.from_error(error)
        outcome = await self.db.execute(args.query)
        return ToolCallResult.from_value({"affected_rows": outcome.affected_rows})

    async def create_table(self, args: CreateTableArgs) -> ToolCallResult:
        error = check_create_table_gate(args.query)
        if error:
            return ToolCallResult.from_error(error)
        await self.db.execute(args.query)
        return ToolCallResult.from_text(TABLE_CREATED_MESSAGE)
