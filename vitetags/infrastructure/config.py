"""
Centralized configuration management for the Vite asset tag resolver.

Provides environment-driven configuration with validation and type safety
using Pydantic settings models.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class ViteConfig(BaseSettings):
    """
    Asset resolution settings.

    Controls whether development mode is forced, where the production build
    is published, and how a malformed manifest is treated.

    Example:
        >>> config = ViteConfig(build_dir="/public/build/")
        >>> config.public_build_dir()
        '/public/build/'
    """

    dev: bool = Field(False, description="Force development mode without a hot file")
    build_dir: str = Field("build", description="Build directory relative to the root")
    root: Path | None = Field(None, description="Working directory (defaults to the cwd)")
    manifest_file: str = Field("manifest.json", description="Manifest file name")
    manifest_errors: Literal["ignore", "raise"] = Field(
        "ignore", description="Policy for a manifest that cannot be parsed"
    )

    model_config = {"env_prefix": "VITE_", "case_sensitive": False, "frozen": True}

    @field_validator("build_dir")
    def validate_build_dir(cls, v):
        """Reject a build directory made only of slashes or whitespace."""
        if not v.strip().strip("/"):
            raise ValueError("build_dir must name a directory")
        return v.strip()

    def public_build_dir(self) -> str:
        """Public URL prefix of the build directory, slash on both ends."""
        return "/" + self.build_dir.strip("/") + "/"


class LoggingConfig(BaseSettings):
    """
    Logging configuration settings.

    Example:
        >>> log_config = LoggingConfig(level="DEBUG", file_path="./logs/vite.log")
        >>> print(log_config.get_file_handler_config())
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Minimum logging level"
    )
    file_path: str | None = Field(None, description="Log file path")
    max_bytes: int = Field(10 * 1024 * 1024, ge=1024, description="Max log file size in bytes")
    backup_count: int = Field(5, ge=1, description="Number of backup log files")
    structured: bool = Field(False, description="Use structured JSON logging")
    console_enabled: bool = Field(True, description="Enable console output")

    model_config = {"env_prefix": "VITE_LOG_", "case_sensitive": False}

    @field_validator("file_path")
    def validate_log_path(cls, v):
        """Ensure log directory exists."""
        if v:
            Path(v).parent.mkdir(parents=True, exist_ok=True)
        return v

    def get_file_handler_config(self) -> dict[str, Any] | None:
        """Get file handler configuration if file logging is enabled."""
        if not self.file_path:
            return None

        return {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": self.file_path,
            "maxBytes": self.max_bytes,
            "backupCount": self.backup_count,
            "encoding": "utf-8",
        }


class Settings:
    """
    Settings container with lazily built sections.

    Example:
        >>> settings = get_settings()
        >>> print(settings.vite.build_dir)
        >>> print(settings.logging.level)
    """

    def __init__(self):
        self._vite: ViteConfig | None = None
        self._logging: LoggingConfig | None = None

    @property
    def vite(self) -> ViteConfig:
        """Get asset resolution configuration."""
        if self._vite is None:
            self._vite = ViteConfig()
        return self._vite

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration."""
        if self._logging is None:
            self._logging = LoggingConfig()
        return self._logging

    def get_environment_info(self) -> dict[str, Any]:
        """Get summary of current configuration."""
        return {
            "dev": self.vite.dev,
            "build_dir": self.vite.public_build_dir(),
            "manifest_errors": self.vite.manifest_errors,
            "logging_level": self.logging.level,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the settings instance (cached).

    Returns:
        Settings instance with all configuration loaded from the environment
    """
    return Settings()


def load_settings_from_file(file_path: str) -> Settings:
    """
    Load settings from a JSON configuration file.

    Each top-level section maps to an environment prefix: the ``vite``
    section sets ``VITE_*`` variables, the ``log`` section ``VITE_LOG_*``.

    Args:
        file_path: Path to a JSON configuration file

    Returns:
        Settings instance with loaded configuration

    Raises:
        FileNotFoundError: If configuration file doesn't exist
        ValueError: If file format is unsupported

    Example:
        >>> settings = load_settings_from_file("config/production.json")
        >>> print(settings.vite.build_dir)
    """
    import json

    config_path = Path(file_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    if config_path.suffix.lower() != ".json":
        raise ValueError(f"Unsupported configuration file format: {config_path.suffix}")

    with open(config_path, encoding="utf-8") as f:
        config_data = json.load(f)

    prefixes = {"vite": "VITE_", "log": "VITE_LOG_", "logging": "VITE_LOG_"}
    for section, values in config_data.items():
        prefix = prefixes.get(section.lower())
        if prefix is None or not isinstance(values, dict):
            continue
        for key, value in values.items():
            os.environ[f"{prefix}{key.upper()}"] = str(value)

    get_settings.cache_clear()
    return get_settings()


def reset_settings() -> None:
    """Reset settings cache to reload from environment."""
    get_settings.cache_clear()
