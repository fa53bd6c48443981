"""Tool Definition — immutable name + description + argument schema triple.

Invariants:
    - name is unique across the registry and never changes
    - args_model is a pydantic model class; its JSON Schema is the published inputSchema
    - to_discovery() is lossless: inputSchema is exactly args_model.model_json_schema()
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from sqlite_mcp.core.domain_types import ToolName


@dataclass(frozen=True)
class ToolDefinition:
    """One agent-callable tool."""
    name: ToolName
    description: str
    args_model: type[BaseModel]

    def input_schema(self) -> dict[str, Any]:
        return self.args_model.model_json_schema()

    def to_discovery(self) -> dict[str, Any]:
        """Discovery entry: {name, description, inputSchema}."""
        return {
            "name": self.name.value,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }
