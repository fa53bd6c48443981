"""SQLite MCP Server — process entry point.

Invariants:
    - Exactly one positional argument (the database path), resolved to an absolute path
    - Wrong argument count → usage on stderr, exit code 1, no dispatcher constructed
    - Database that cannot be opened → logged, exit code 1
    - Gateway connection closed on every exit path once opened

Design Decisions:
    - Bootstrap failures are the only fatal errors; tool-call failures are envelopes
    - Gateway created here and injected into ToolDispatch (no module-level singleton)
"""

import asyncio
import logging
import sys
from pathlib import Path

from sqlite_mcp.config import Settings, get_settings
from sqlite_mcp.core.errors import DatabaseError, UsageError
from sqlite_mcp.infrastructure.database import SqliteGateway, sqlite_url
from sqlite_mcp.infrastructure.observability import setup_logging
from sqlite_mcp.server import build_server, run_stdio
from sqlite_mcp.services.tool_dispatch import ToolDispatch

logger = logging.getLogger(__name__)

USAGE = "Usage: mcp-server-sqlite <database-path>"


def parse_database_path(args: list[str]) -> Path:
    """Validate argv (without program name) and resolve the database path."""
    if len(args) != 1:
        raise UsageError(USAGE)
    return Path(args[0]).resolve()


async def serve(database_path: Path, settings: Settings) -> None:
    """Open the database, build the dispatcher and serve until EOF."""
    gateway = SqliteGateway(sqlite_url(database_path))
    try:
        await gateway.connect()
        dispatch = ToolDispatch(gateway)
        server = build_server(dispatch, settings)
        await run_stdio(server, str(database_path))
    finally:
        await gateway.close()


def run(args: list[str]) -> int:
    """Entry logic, returns the process exit code."""
    try:
        database_path = parse_database_path(args)
    except UsageError as e:
        print(e.message, file=sys.stderr)
        return 1

    settings = get_settings()
    setup_logging(
        settings.log_level, settings.log_format, echo_sql=settings.echo_sql,
    )
    try:
        asyncio.run(serve(database_path, settings))
    except DatabaseError as e:
        logger.critical(
            f"Fatal error running server: {e.message}",
            extra=e.to_log_extra(),
        )
        return 1
    except Exception as e:
        logger.critical(f"Fatal error running server: {e}", exc_info=True)
        return 1
    except KeyboardInterrupt:
        logger.info("SQLite MCP Server interrupted")
    return 0


def main() -> None:
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
