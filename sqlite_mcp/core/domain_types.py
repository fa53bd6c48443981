"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - SqlText and TableName wrap str — raw agent input never flows untyped past validation
    - StatementKind is derived from SQL text on every call, never stored
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

SqlText = NewType("SqlText", str)
TableName = NewType("TableName", str)


# ─── Enums ───────────────────────────────────────────────────────

class StatementKind(str, Enum):
    """Coarse lexical classification of SQL text."""
    READ = "read"
    WRITE = "write"
    CREATE_TABLE = "create_table"


class ToolName(str, Enum):
    """The five fixed tools exposed to the agent."""
    READ_QUERY = "read_query"
    WRITE_QUERY = "write_query"
    CREATE_TABLE = "create_table"
    LIST_TABLES = "list_tables"
    DESCRIBE_TABLE = "describe_table"


class ErrorCode(str, Enum):
    """Stable error codes surfaced in logs and error envelopes."""
    USAGE_ERROR = "USAGE_ERROR"
    UNKNOWN_TOOL = "UNKNOWN_TOOL"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    GATING_ERROR = "GATING_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    TABLE_NOT_FOUND = "TABLE_NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"
