"""Gate Enforcement — tests for pure per-tool statement gating.

Tests cover:
    - read gate accepts SELECT, rejects writes and CREATE TABLE
    - write gate rejects SELECT, accepts writes and CREATE TABLE
    - create_table gate accepts only CREATE TABLE
    - GatingError carries tool, expected kind, and sql prefix
"""

from sqlite_mcp.core.domain_types import ErrorCode
from sqlite_mcp.core.enforce_gates import (
    check_create_table_gate,
    check_read_gate,
    check_write_gate,
)
from sqlite_mcp.core.errors import GatingError


# ─── check_read_gate ─────────────────────────────────────────────

def test_read_gate_allows_select():
    assert check_read_gate("SELECT 1") is None


def test_read_gate_rejects_update():
    error = check_read_gate("UPDATE t SET x=1")
    assert isinstance(error, GatingError)
    assert error.code is ErrorCode.GATING_ERROR
    assert error.message == "Only SELECT queries are allowed for read_query"
    assert error.tool_name == "read_query"
    assert error.expected_kind == "SELECT"
    assert error.sql_prefix == "UPDATE t SET x=1"


def test_read_gate_rejects_create_table():
    assert check_read_gate("CREATE TABLE t (x)") is not None


# ─── check_write_gate ────────────────────────────────────────────

def test_write_gate_rejects_select():
    error = check_write_gate("  select 1")
    assert error is not None
    assert error.message == "SELECT queries are not allowed for write_query"


def test_write_gate_allows_insert_update_delete():
    assert check_write_gate("INSERT INTO t(x) VALUES (1)") is None
    assert check_write_gate("UPDATE t SET x=2") is None
    assert check_write_gate("DELETE FROM t") is None


def test_write_gate_allows_create_table():
    assert check_write_gate("CREATE TABLE t (x)") is None


# ─── check_create_table_gate ─────────────────────────────────────

def test_create_gate_allows_create_table():
    assert check_create_table_gate("CREATE TABLE t (x INTEGER)") is None


def test_create_gate_rejects_insert():
    error = check_create_table_gate("INSERT INTO t(x) VALUES (1)")
    assert error is not None
    assert error.message == "Only CREATE TABLE statements are allowed"
    assert error.expected_kind == "CREATE TABLE"


def test_create_gate_rejects_create_index():
    assert check_create_table_gate("CREATE INDEX i ON t(x)") is not None
