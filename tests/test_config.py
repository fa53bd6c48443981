"""Settings — tests for defaults and environment overrides."""

from sqlite_mcp.config import Settings, get_settings


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = Settings()
    assert settings.server_name == "sqlite-manager"
    assert settings.server_version == "0.1.0"
    assert settings.log_level == "INFO"
    assert settings.log_format == "text"
    assert settings.echo_sql is False


def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SQLITE_MCP_LOG_LEVEL", "debug")
    monkeypatch.setenv("SQLITE_MCP_LOG_FORMAT", "json")
    monkeypatch.setenv("SQLITE_MCP_SERVER_NAME", "inventory-db")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"
    assert settings.server_name == "inventory-db"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
