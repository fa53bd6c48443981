"""Tools Registry — the fixed tool set, schema description, and argument validation.

Invariants:
    - ALL_TOOLS holds exactly five definitions in stable insertion order
    - Tool names are unique (checked at import)
    - validate_arguments() never raises: returns (args, None) or (None, ToolValidationError)
    - None arguments are treated as an empty object; non-object arguments fail validation

Design Decisions:
    - Explicit imports from each define_*_tools.py: no auto-discovery
    - Tuple result over raising: the dispatcher branches on the error value,
      so a failed validation cannot unwind past a handler by accident
"""

from typing import Any

from pydantic import BaseModel, ValidationError

from sqlite_mcp.core.errors import ToolValidationError
from sqlite_mcp.services.define_query_tools import TOOLS_QUERY
from sqlite_mcp.services.define_schema_tools import TOOLS_SCHEMA
from sqlite_mcp.services.tool_definition import ToolDefinition

ALL_TOOLS: list[ToolDefinition] = [
    *TOOLS_QUERY,     # 3 tools
    *TOOLS_SCHEMA,    # 2 tools
]


def _index_by_name(tools: list[ToolDefinition]) -> dict[str, ToolDefinition]:
    index: dict[str, ToolDefinition] = {}
    for tool in tools:
        if tool.name.value in index:
            raise RuntimeError(f"Duplicate tool name in registry: {tool.name.value}")
        index[tool.name.value] = tool
    return index


_BY_NAME = _index_by_name(ALL_TOOLS)


def list_tools() -> list[ToolDefinition]:
    """All tools, in discovery order."""
    return list(ALL_TOOLS)


def get_tool(name: str) -> ToolDefinition | None:
    return _BY_NAME.get(name)


def describe_schema(tool: ToolDefinition) -> dict[str, Any]:
    """JSON Schema for the tool's arguments (discovery format)."""
    return tool.input_schema()


def _format_reason(error: dict) -> str:
    loc = ".".join(str(part) for part in error.get("loc", ()))
    if not loc:
        return error["msg"]
    return f"{loc}: {error['msg']}"


def validate_arguments(
    tool: ToolDefinition, raw: Any,
) -> tuple[BaseModel | None, ToolValidationError | None]:
    """Validate raw agent arguments against the tool's schema."""
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        return None, ToolValidationError(
            tool.name.value,
            [f"expected an object of arguments, got {type(raw).__name__}"],
        )
    try:
        return tool.args_model.model_validate(raw), None
    except ValidationError as e:
        reasons = [_format_reason(err) for err in e.errors()]
        return None, ToolValidationError(tool.name.value, reasons)
