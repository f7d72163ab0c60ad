"""Environment-based configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    """Reads from .env file and ``LINTNAMES_*`` environment variables."""

    # Logging
    log_level: str = "INFO"

    # Extra catalog YAML files, merged after the built-in names
    catalog_files: Annotated[list[Path], NoDecode] = []

    @field_validator("catalog_files", mode="before")
    @classmethod
    def _parse_catalog_files(cls, v: Any) -> Any:
        """Accept comma-separated string or list."""
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "LINTNAMES_",
        "extra": "ignore",
    }
