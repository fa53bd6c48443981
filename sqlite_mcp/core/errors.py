"""Error Hierarchy — typed, categorized exceptions for every SQLite MCP failure mode.

Invariants:
    - Every error has a code (ErrorCode), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are recoverable; bootstrap errors are fatal
    - to_envelope_text() is the only rendering used in tool-call results
    - Engine messages surface verbatim (the agent needs them to fix its SQL)

Design Decisions:
    - Single hierarchy with SqliteMcpError base: dispatcher catches all at one boundary
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Validation and gating errors are instantiated and returned, not raised, by core/
      and services/tools_registry; infrastructure raises the rest
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from sqlite_mcp.core.domain_types import ErrorCode


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    USAGE = "usage"
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tool_name: str | None = None
    debug_info: dict[str, Any] | None = None


class SqliteMcpError(Exception):
    """Base exception for all SQLite MCP errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    @property
    def recoverable(self) -> bool:
        return self.severity is not ErrorSeverity.CRITICAL

    def to_envelope_text(self) -> str:
        """Human-readable payload for the error envelope."""
        return f"Error: {self.message}"

    def to_log_extra(self) -> dict:
        """Structured fields for logger extra=."""
        return {
            "error_code": self.code.value,
            "tool_name": self.context.tool_name,
        }


# ─── Bootstrap Errors (fatal) ───────────────────────────────────

class UsageError(SqliteMcpError):
    """Wrong process arguments."""
    def __init__(self, message: str):
        super().__init__(
            message, ErrorCode.USAGE_ERROR, ErrorCategory.USAGE,
            ErrorSeverity.CRITICAL,
        )


# ─── Domain Errors (recoverable) ────────────────────────────────

class UnknownToolError(SqliteMcpError):
    """Tool name not present in the registry."""
    def __init__(self, name: str):
        super().__init__(
            f"Unknown tool: {name}",
            ErrorCode.UNKNOWN_TOOL, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ErrorContext(tool_name=name),
        )
        self.name = name


class ToolValidationError(SqliteMcpError):
    """Tool arguments failed the declared schema."""
    def __init__(self, tool_name: str, reasons: list[str]):
        super().__init__(
            f"Invalid arguments for {tool_name}: {'; '.join(reasons)}",
            ErrorCode.VALIDATION_ERROR, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ErrorContext(tool_name=tool_name),
        )
        self.tool_name = tool_name
        self.reasons = list(reasons)


class GatingError(SqliteMcpError):
    """SQL statement kind not permitted for the tool."""
    def __init__(
        self,
        message: str,
        tool_name: str,
        expected_kind: str,
        sql_prefix: str,
    ):
        super().__init__(
            message, ErrorCode.GATING_ERROR, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR,
            ErrorContext(tool_name=tool_name, debug_info={"sql_prefix": sql_prefix}),
        )
        self.tool_name = tool_name
        self.expected_kind = expected_kind
        self.sql_prefix = sql_prefix


class TableNotFoundError(SqliteMcpError):
    """Introspected table does not exist."""
    def __init__(self, table_name: str):
        super().__init__(
            f"Table '{table_name}' does not exist",
            ErrorCode.TABLE_NOT_FOUND, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR,
        )
        self.table_name = table_name


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(SqliteMcpError):
    """Underlying engine rejected the statement or the connection failed."""
    def __init__(
        self,
        message: str,
        operation: str,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
    ):
        super().__init__(
            message, ErrorCode.DATABASE_ERROR, ErrorCategory.DATABASE,
            severity,
        )
        self.operation = operation
