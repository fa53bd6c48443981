"""Structured Logging — stderr-only logging setup for the stdio server.

Invariants:
    - Logs go to stderr, never stdout: stdout carries MCP protocol frames only
    - All logs include timestamp, level, logger name, and message
    - Tool-call context (tool_name, error_code, duration_ms) and gateway context
      (operation) surfaced when present, in both formats
    - SQL statement echo flows through the same stderr handler, never SQLAlchemy's own

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Typed errors attached via exc_info contribute their code and category,
      so a traceback line can be filtered like a tool-call line
    - setup_logging called once on startup from main
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from sqlite_mcp.core.errors import SqliteMcpError

SQL_ECHO_LOGGER = "sqlalchemy.engine"

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# record attribute -> label used in the text suffix
_CONTEXT_LABELS = {
    "tool_name": "tool",
    "operation": "op",
    "error_code": "error",
}


def _context_fields(record: logging.LogRecord) -> dict[str, Any]:
    fields = {}
    for key in (*_CONTEXT_LABELS, "duration_ms"):
        val = record.__dict__.get(key)
        if val is not None:
            fields[key] = val
    exc = record.exc_info[1] if record.exc_info else None
    if isinstance(exc, SqliteMcpError):
        fields.setdefault("error_code", exc.code.value)
        fields["error_category"] = exc.category.value
    return fields


class JSONFormatter(logging.Formatter):
    """One JSON object per line; context fields flattened into the object."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context_fields(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable line with a bracketed context suffix, e.g.

        ... Tool 'read_query' failed: ... [tool=read_query error=GATING_ERROR 0.41ms]
    """

    def __init__(self):
        super().__init__(_TEXT_FORMAT)

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        fields = _context_fields(record)
        parts = [
            f"{label}={fields[key]}"
            for key, label in _CONTEXT_LABELS.items() if key in fields
        ]
        if "duration_ms" in fields:
            parts.append(f"{fields['duration_ms']}ms")
        if not parts:
            return line
        return f"{line} [{' '.join(parts)}]"


def setup_logging(
    level: str = "INFO", fmt: str = "text", echo_sql: bool = False,
) -> logging.Handler:
    """Configure root logging on stderr. Returns the installed handler."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    # INFO on the engine logger is what echo=True would set, minus the stdout handler
    logging.getLogger(SQL_ECHO_LOGGER).setLevel(
        logging.INFO if echo_sql else logging.WARNING,
    )
    return handler
