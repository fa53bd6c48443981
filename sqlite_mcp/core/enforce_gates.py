"""Statement Gate Enforcement — each SQL-bearing tool accepts only its statement kind.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return GatingError on violation, None on success (errors are values, never raised)
    - Gates run before any database access: a rejected statement is never executed
    - write_query rejects only READ; CREATE TABLE passes through it

Design Decisions:
    - Pure functions over method dispatch: testable without a database
    - Return error objects (not exceptions): handlers must branch on the result,
      keeping the error path as explicit as the success path
"""

from sqlite_mcp.core.classify_statement import classify_statement, sql_prefix
from sqlite_mcp.core.domain_types import StatementKind, ToolName
from sqlite_mcp.core.errors import GatingError


def check_read_gate(sql: str) -> GatingError | None:
    """read_query: only SELECT statements."""
    if classify_statement(sql) is not StatementKind.READ:
        return GatingError(
            "Only SELECT queries are allowed for read_query",
            ToolName.READ_QUERY.value, "SELECT", sql_prefix(sql),
        )
    return None


def check_write_gate(sql: str) -> GatingError | None:
    """write_query: anything except SELECT."""
    if classify_statement(sql) is StatementKind.READ:
        return GatingError(
            "SELECT queries are not allowed for write_query",
            ToolName.WRITE_QUERY.value, "non-SELECT", sql_prefix(sql),
        )
    return None


def check_create_table_gate(sql: str) -> GatingError | None:
    """create_table: only CREATE TABLE statements."""
    if classify_statement(sql) is not StatementKind.CREATE_TABLE:
        return GatingError(
            "Only CREATE TABLE statements are allowed",
            ToolName.CREATE_TABLE.value, "CREATE TABLE", sql_prefix(sql),
        )
    return None
