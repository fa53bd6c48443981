"""Root conftest — shared fixtures backed by a temporary SQLite file.

Invariants:
    - Every test gets a fresh database file under tmp_path
    - The gateway is connected before the test and closed after it
    - get_settings cache cleared so env overrides in one test don't leak

Design Decisions:
    - Temporary file over :memory: — same code path as production (absolute file path)
"""

import pytest

from sqlite_mcp.config import get_settings
from sqlite_mcp.infrastructure.database import SqliteGateway, sqlite_url
from sqlite_mcp.services.tool_dispatch import ToolDispatch


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "test.db"


@pytest.fixture
async def gateway(db_path):
    gw = SqliteGateway(sqlite_url(db_path))
    await gw.connect()
    yield gw
    await gw.close()


@pytest.fixture
def dispatch(gateway):
    return ToolDispatch(gateway)


@pytest.fixture
async def items_table(gateway):
    """A small populated table: items(id INTEGER PRIMARY KEY, name TEXT NOT NULL, qty INTEGER DEFAULT 0)."""
    await gateway.execute(
        "CREATE TABLE items (id INTEGER PRIMARY KEY, name TEXT NOT NULL, qty INTEGER DEFAULT 0)"
    )
    await gateway.execute("INSERT INTO items (name, qty) VALUES ('apple', 3), ('pear', 5)")
    return "items"
