from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="DOCX_TRIMMER_"
    )

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    DEFAULT_FONT_SIZE: int = Field(
        default=14,
        description="Font size (points) of the exported run when none is given.",
    )

    MIN_FONT_SIZE: int = Field(
        default=1,
        description="Smallest font size accepted from a form or the CLI.",
    )

    MAX_FONT_SIZE: int = Field(
        default=72,
        description="Largest font size accepted from a form or the CLI.",
    )

    EXPORT_FILENAME: str = Field(
        default="example.docx",
        description="Fixed filename of the downloadable trimmed document.",
    )

    # ------------------------------------------------------------------
    # Uploads / service
    # ------------------------------------------------------------------
    MAX_UPLOAD_BYTES: int = Field(
        default=20 * 1024 * 1024,
        description="Uploads larger than this are rejected before parsing.",
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level for the web service.",
    )

    @property
    def font_size_range(self) -> tuple[int, int]:
        return self.MIN_FONT_SIZE, self.MAX_FONT_SIZE


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Singleton-style accessor so Settings is only constructed once.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


settings = get_settings()
