"""Database Gateway — the single autocommit connection to one SQLite file.

Invariants:
    - Exactly one AsyncConnection per gateway, opened by connect(), held until close()
    - Every statement is its own autocommit unit of work (no cross-call transactions)
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py) carrying the engine's message
    - The gateway does not gate statement kinds: that happens in core/enforce_gates.py
    - Table names are quoted by the dialect's identifier preparer before interpolation

Design Decisions:
    - Gateway injected into ToolDispatch, never a module-level singleton:
      tests build one per temporary database file
    - exec_driver_sql over text(): agent SQL goes to the driver verbatim, so a literal
      ':name' inside a string is not mistaken for a bind parameter
    - aiosqlite driver: the MCP server is async, every gateway call is awaited to completion
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, create_async_engine

from sqlite_mcp.core.domain_types import TableName
from sqlite_mcp.core.errors import DatabaseError, ErrorSeverity, TableNotFoundError

logger = logging.getLogger(__name__)

_LIST_TABLES_SQL = (
    "SELECT name FROM sqlite_master "
    "WHERE type = 'table' AND name NOT LIKE 'sqlite\\_%' ESCAPE '\\' "
    "ORDER BY name"
)


@dataclass(frozen=True)
class ExecuteResult:
    """Outcome of a mutation."""
    affected_rows: int


@dataclass(frozen=True)
class ColumnDescriptor:
    """One column of a table, as reported by PRAGMA table_info."""
    position: int
    name: str
    declared_type: str
    not_null: bool
    default_value: Any
    is_primary_key: bool


def sqlite_url(path: str | Path) -> str:
    """Async SQLAlchemy URL for an absolute database file path."""
    return f"sqlite+aiosqlite:///{Path(path).resolve()}"


def _engine_message(exc: SQLAlchemyError) -> str:
    """The driver's own message, without SQLAlchemy's statement/background decoration."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


class SqliteGateway:
    """Owns the connection; exposes query/execute and catalog introspection."""

    def __init__(self, database_url: str):
        # No echo=: SQLAlchemy would attach its own stdout handler.
        # Statement logging is switched on by setup_logging(echo_sql=True).
        self.engine = create_async_engine(database_url, isolation_level="AUTOCOMMIT")
        self._conn: AsyncConnection | None = None

    @property
    def connected(self) -> bool:
        return self._conn is not None

    async def connect(self) -> None:
        """Open the connection and verify it answers. Failure is fatal at bootstrap."""
        try:
            self._conn = await self.engine.connect()
            await self._conn.exec_driver_sql("SELECT 1")
        except SQLAlchemyError as e:
            logger.error(f"DB connect failed: {e}")
            raise DatabaseError(
                f"Unable to open database: {_engine_message(e)}",
                "connect", ErrorSeverity.CRITICAL,
            ) from e

    async def close(self) -> None:
        if self._conn is not None:
            await self._conn.close()
            self._conn = None
        await self.engine.dispose()

    async def _run(self, sql: str, operation: str):
        if self._conn is None:
            raise DatabaseError("Database not connected", operation)
        try:
            return await self._conn.exec_driver_sql(sql)
        except SQLAlchemyError as e:
            message = _engine_message(e)
            logger.warning(f"DB {operation} failed: {message}", extra={"operation": operation})
            raise DatabaseError(message, operation) from e

    async def query(self, sql: str) -> list[dict[str, Any]]:
        """Run a statement and return its rows as column->value dicts."""
        result = await self._run(sql, "query")
        if not result.returns_rows:
            return []
        return [dict(row) for row in result.mappings()]

    async def execute(self, sql: str) -> ExecuteResult:
        """Run a mutation and report the affected row count."""
        result = await self._run(sql, "execute")
        if result.returns_rows:
            # RETURNING clauses only take effect once their rows are stepped
            result.all()
        return ExecuteResult(affected_rows=max(result.rowcount, 0))

    async def list_tables(self) -> list[dict[str, str]]:
        """All user tables, ordered by name."""
        return await self.query(_LIST_TABLES_SQL)

    async def describe_table(self, table_name: TableName) -> list[ColumnDescriptor]:
        """Column catalog for one table. Unknown table → TableNotFoundError."""
        quoted = self.engine.dialect.identifier_preparer.quote_identifier(table_name)
        result = await self._run(f"PRAGMA table_info({quoted})", "describe")
        rows = list(result.mappings())
        if not rows:
            raise TableNotFoundError(table_name)
        return [
            ColumnDescriptor(
                position=row["cid"],
                name=row["name"],
                declared_type=row["type"],
                not_null=bool(row["notnull"]),
                default_value=row["dflt_value"],
                is_primary_key=bool(row["pk"]),
            )
            for row in rows
        ]
