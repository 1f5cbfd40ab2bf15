"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from ``GITDOWN_*`` env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_prefix="GITDOWN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_root: str = "https://api.github.com/repos"
    raw_base: str = "https://raw.githubusercontent.com"
    user_agent: str = "gitdown"
    request_timeout: float = 30.0
    picker_command: str = "fzf"
    picker_height: str = "40%"
    create_parent_dirs: bool = True
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
