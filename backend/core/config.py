"""
Merch Calendar Configuration

Uses pydantic-settings for type-safe environment variable loading.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
LOG_FORMATS = {"console", "json"}

# Find .env file: check CWD first, then parent (project root)
_env_file = Path(".env")
if not _env_file.exists():
    _parent_env = Path(__file__).resolve().parent.parent.parent / ".env"
    if _parent_env.exists():
        _env_file = _parent_env


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "MerchCalendar"
    app_version: str = "1.0.0"
    app_env: str = "local"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # console | json

    model_config = {
        "env_file": str(_env_file),
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    settings = Settings()
    _enforce_guardrails(settings)
    return settings


def _enforce_guardrails(settings: Settings) -> None:
    if settings.log_level.strip().upper() not in LOG_LEVELS:
        raise ValueError(f"Unknown log_level {settings.log_level!r}; expected one of {sorted(LOG_LEVELS)}")
    if settings.log_format.strip().lower() not in LOG_FORMATS:
        raise ValueError(f"Unknown log_format {settings.log_format!r}; expected one of {sorted(LOG_FORMATS)}")

    env = settings.app_env.strip().lower()
    is_local = env in {"", "local", "dev", "development", "test"}
    if not is_local and settings.debug:
        raise ValueError("Refusing to start with debug=true outside local/dev/test")
