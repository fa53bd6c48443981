"""Tool Call Result — the uniform envelope returned for every tool invocation.

Invariants:
    - Success and failure share one shape: is_error + ordered text content blocks
    - Error text is always "Error: <message>"
    - Success payloads are pretty-printed JSON (indent 2) unless a literal message is given

Design Decisions:
    - Envelope shape identical for both paths: callers read content[0].text without branching
    - BLOB values rendered as hex: json has no bytes type and SQLite returns bytes for BLOBs
"""

import json
from dataclasses import dataclass, field
from typing import Any

from sqlite_mcp.core.domain_types import ErrorCode
from sqlite_mcp.core.errors import SqliteMcpError


@dataclass(frozen=True)
class TextContent:
    """A single text block of an envelope."""
    text: str
    type: str = "text"

    def to_dict(self) -> dict:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class ToolCallResult:
    """Envelope for one tool call."""
    content: list[TextContent] = field(default_factory=list)
    is_error: bool = False
    error_code: str | None = None

    @property
    def text(self) -> str:
        """Concatenated text of all content blocks."""
        return "".join(block.text for block in self.content)

    @classmethod
    def from_text(cls, text: str) -> "ToolCallResult":
        return cls(content=[TextContent(text)])

    @classmethod
    def from_value(cls, value: Any) -> "ToolCallResult":
        return cls.from_text(render_json(value))

    @classmethod
    def from_error(cls, error: SqliteMcpError) -> "ToolCallResult":
        return cls(
            content=[TextContent(error.to_envelope_text())],
            is_error=True,
            error_code=error.code.value,
        )

    @classmethod
    def from_unexpected(cls, exc: BaseException) -> "ToolCallResult":
        """Envelope for a fault that escaped the typed hierarchy."""
        message = str(exc) or exc.__class__.__name__
        return cls(
            content=[TextContent(f"Error: {message}")],
            is_error=True,
            error_code=ErrorCode.INTERNAL_ERROR.value,
        )

    def to_dict(self) -> dict:
        """Wire shape: {content: [...], isError?: true}."""
        out: dict[str, Any] = {
            "content": [block.to_dict() for block in self.content],
        }
        if self.is_error:
            out["isError"] = True
        return out


def _encode_value(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).hex()
    return str(value)


def render_json(value: Any) -> str:
    """Pretty-print a result value as multi-line JSON."""
    return json.dumps(value, indent=2, ensure_ascii=False, default=_encode_value)
