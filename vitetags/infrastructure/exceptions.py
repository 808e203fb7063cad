"""
Custom exception classes for the Vite asset tag resolver.

Provides structured errors carrying a developer message, machine-readable
details and a short user-facing message.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class ViteTagsError(Exception):
    """Base exception for all resolver errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        user_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.user_message = user_message or self._get_default_user_message()

    def _get_default_user_message(self) -> str:
        """Provide a user-friendly version of the error message."""
        return "Page assets could not be resolved."

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.message}"


class ConfigurationError(ViteTagsError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
        user_message: str | None = None,
    ):
        self.config_key = config_key
        super().__init__(
            message=message,
            details=details or {"config_key": config_key},
            user_message=user_message or "Configuration error. Please check your settings.",
        )


class ManifestError(ConfigurationError):
    """Raised when the build manifest exists but cannot be used."""

    def __init__(self, message: str, manifest_path: Path | str, reason: str | None = None):
        self.manifest_path = Path(manifest_path)
        self.reason = reason
        super().__init__(
            message=f"Invalid manifest {self.manifest_path}: {message}",
            config_key="manifest_file",
            details={"manifest_path": str(self.manifest_path), "reason": reason},
            user_message="The asset manifest is invalid. Rebuild the frontend and try again.",
        )


def log_error_details(error: Exception, context: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    Create structured error details for logging.

    Args:
        error: The exception to log
        context: Additional context information

    Returns:
        Dictionary with structured error details

    Example:
        >>> error = ManifestError("not an object", "build/manifest.json")
        >>> details = log_error_details(error, {"build_dir": "build"})
        >>> print(details["error_type"])  # "ManifestError"
    """
    details = {
        "error_type": type(error).__name__,
        "error_message": str(error),
        "context": context or {},
    }

    if isinstance(error, ViteTagsError):
        details.update({"user_message": error.user_message, "error_details": error.details})

    return details
