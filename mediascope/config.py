"""
Runtime configuration for the command line tool.

Uses ``pydantic_settings.BaseSettings`` for environment variable
binding (prefix ``MEDIASCOPE_``), type coercion, and validation.
Only the CLI layer reads settings; extraction and scoring take
their inputs explicitly.
"""

from __future__ import annotations

import pathlib
from datetime import timedelta

import pydantic
import pydantic_settings


class Settings(pydantic_settings.BaseSettings):
    """Tool settings.

    Attributes:
        cache_dir: Directory for cached reports.
        cache_ttl_hours: How long a cached report stays valid.
        output_root: Root directory for synthesized output paths.
        navigation_timeout_ms: Page load timeout.
        headless: Launch Chromium without a window.
        write_logs_to_file: Mirror log lines to ``.logs/``.
    """

    model_config = pydantic_settings.SettingsConfigDict(env_prefix="MEDIASCOPE_")

    cache_dir: pathlib.Path = pathlib.Path(".cache") / "media-queries"
    cache_ttl_hours: float = pydantic.Field(default=24, gt=0)
    output_root: pathlib.Path = pathlib.Path("analysis")
    navigation_timeout_ms: int = pydantic.Field(default=60000, gt=0)
    headless: bool = True
    write_logs_to_file: bool = False

    @property
    def cache_ttl(self) -> timedelta:
        return timedelta(hours=self.cache_ttl_hours)
