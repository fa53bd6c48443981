"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - The database path is never a setting: it is the one positional CLI argument

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - SQLITE_MCP_ prefix keeps our variables apart from the host agent's environment
    - Defaults provided for every setting: works with no configuration at all
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SQLITE_MCP_", env_file=".env",
        case_sensitive=False, extra="ignore",
    )

    # MCP server identity (reported during initialization)
    server_name: str = "sqlite-manager"
    server_version: str = "0.1.0"

    # Observability
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"

    # SQLAlchemy statement logging, routed through the stderr handler
    echo_sql: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
