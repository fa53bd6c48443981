"""Tool Argument Schemas — Pydantic models validating agent-supplied tool arguments.

Invariants:
    - Every field is typed and described: the description is the agent-facing hint
    - No type coercion for strings: numbers, lists and objects are rejected
    - Unknown extra keys are ignored (lenient object, like the original tool contract)
    - DescribeTableArgs.table_name obeys IDENTIFIER_PATTERN before it reaches SQL text

Design Decisions:
    - Pydantic models double as SchemaNode: model_json_schema() is the discovery format
    - Identifier grammar published in the schema itself (pattern), so agents see the rule
"""

from pydantic import BaseModel, ConfigDict, Field

# Conservative SQLite identifier grammar for introspection targets
IDENTIFIER_PATTERN = r"^[A-Za-z_][A-Za-z0-9_$]*$"


class _ToolArgs(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)


class ReadQueryArgs(_ToolArgs):
    """Arguments for read_query."""
    query: str = Field(description="SELECT SQL query to execute")


class WriteQueryArgs(_ToolArgs):
    """Arguments for write_query."""
    query: str = Field(description="INSERT, UPDATE, or DELETE SQL query to execute")


class CreateTableArgs(_ToolArgs):
    """Arguments for create_table."""
    query: str = Field(description="CREATE TABLE SQL statement")


class ListTablesArgs(_ToolArgs):
    """list_tables takes no arguments."""


class DescribeTableArgs(_ToolArgs):
    """Arguments for describe_table."""
    table_name: str = Field(
        description="Name of the table to describe",
        pattern=IDENTIFIER_PATTERN,
    )
