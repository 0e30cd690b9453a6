"""
Settings for storage, history, rendering and logging.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Barcode Studio configuration, read from ``BARCODE_STUDIO_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="BARCODE_STUDIO_",
        # .env.local wins over .env
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Deployment; prod always logs JSON
    environment: Literal["dev", "staging", "prod"] = "dev"

    # Key-value storage
    storage_path: Path = Field(
        Path.home() / ".barcode_studio" / "storage.json",
        description="JSON file backing the key-value store",
    )

    # History
    history_limit: int = Field(100, ge=1, description="Max entries kept per history list")

    # Rendering
    default_render_size: int = Field(200, gt=0, description="Target QR size in pixels")

    # Localization
    default_language: Literal["en", "es", "fr"] = "en"

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"

    @property
    def is_production(self) -> bool:
        return self.environment == "prod"


@lru_cache
def get_settings() -> Settings:
    """Settings loaded once per process; call ``get_settings.cache_clear()`` to reload."""
    return Settings()
