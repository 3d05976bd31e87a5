"""Configuration loading utilities."""

from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_prefix="BOARDADMIN_", env_file=".env", extra="ignore")

    api_base_url: str = "http://localhost:8000"
    api_timeout: float = 10.0

    db_path: str = "boardadmin.db"

    # Token refresh scheduling
    refresh_margin_seconds: int = 300
    refresh_retry_seconds: int = 240

    # Links to the public site
    public_site_url: str = "http://localhost:3000"

    # Listing sizes
    page_size: int = 20
    pending_page_size: int = 50

    log_level: str = "WARNING"


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from the environment, overlaid with an optional YAML file."""
    if path is None:
        return Settings()
    overrides = load_yaml(path)
    return Settings(**overrides)
