"""Process entry — tests for argument handling and fatal bootstrap paths.

Tests cover:
    - Wrong argument count → usage on stderr, exit 1
    - Path resolved to absolute
    - Unopenable database → exit 1
"""

import pytest

from sqlite_mcp import main as main_module
from sqlite_mcp.core.errors import UsageError
from sqlite_mcp.main import USAGE, parse_database_path, run


@pytest.mark.parametrize("args", [[], ["a.db", "b.db"]])
def test_wrong_argument_count_prints_usage(args, capsys):
    assert run(args) == 1
    captured = capsys.readouterr()
    assert USAGE in captured.err
    assert captured.out == ""


def test_parse_database_path_resolves(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = parse_database_path(["data.db"])
    assert path.is_absolute()
    assert path == tmp_path.resolve() / "data.db"


def test_parse_database_path_rejects_no_args():
    with pytest.raises(UsageError):
        parse_database_path([])


def test_unopenable_database_exits_nonzero(tmp_path, monkeypatch):
    monkeypatch.setattr(main_module, "setup_logging", lambda *a, **k: None)
    assert run([str(tmp_path / "missing" / "x.db")]) == 1
