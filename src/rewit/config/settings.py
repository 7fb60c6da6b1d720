"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from REWIT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REWIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    log_level: str = "INFO"
    json_logs: bool = False

    # Configuration document
    config_file: str = "rewit.yml"

    # GitHub
    token_envar: str = "GITHUB_TOKEN"
    github_api_url: str = "https://api.github.com"
    ssh_host: str = "github.com"
    per_page: int = 100
    http_timeout_seconds: float = 30.0

    # History rewriting
    rewriter: str = "filter-branch"  # only "filter-branch" for now


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
