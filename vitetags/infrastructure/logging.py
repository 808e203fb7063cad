"""
Centralized logging configuration for the Vite asset tag resolver.

Provides structured logging with context tracking. Nothing is configured at
import time; applications call ``setup_logging`` or ``configure_logging``.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from pathlib import Path
from types import TracebackType
from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from vitetags.infrastructure.config import Settings

ROOT_LOGGER = "vitetags"


class StructuredFormatter(logging.Formatter):
    """Custom formatter that outputs structured JSON logs."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add extra context if available
        if hasattr(record, "operation"):
            log_entry["operation"] = record.operation
        if hasattr(record, "request_id"):
            log_entry["request_id"] = record.request_id
        if hasattr(record, "manifest_path"):
            log_entry["manifest_path"] = str(record.manifest_path)

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None and exc_value is not None:
                log_entry["exception"] = {
                    "type": exc_type.__name__,
                    "message": str(exc_value),
                    "traceback": self.formatException((exc_type, exc_value, exc_tb)),
                }

        return json.dumps(log_entry, ensure_ascii=False)


class ContextFilter(logging.Filter):
    """Filter that adds operation context to log records."""

    def __init__(self):
        super().__init__()
        self.context: dict[str, Any] = {}

    def set_context(self, **kwargs: Any) -> None:
        """Set context variables for logging."""
        self.context.update(kwargs)

    def clear_context(self) -> None:
        """Clear all context variables."""
        self.context.clear()

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context to log record."""
        for key, value in self.context.items():
            setattr(record, key, value)
        return True


# Global context filter instance
context_filter = ContextFilter()


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    structured: bool = False,
    enable_console: bool = True,
    file_handler: dict[str, Any] | None = None,
) -> None:
    """
    Set up logging for the ``vitetags`` logger tree.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
        structured: Whether to use structured JSON formatting
        enable_console: Whether to enable console output
        file_handler: Optional rotating file handler overrides (maxBytes, backupCount)

    Example:
        >>> setup_logging(level="DEBUG", log_file="./logs/vite.log")
    """
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structured": {
                "()": StructuredFormatter,
            },
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "filters": {"context": {"()": lambda: context_filter}},
        "handlers": {},
        "loggers": {
            ROOT_LOGGER: {"level": level, "handlers": [], "propagate": False},
        },
    }

    handler_configs = cast(dict[str, dict[str, Any]], config["handlers"])
    logger_configs = cast(dict[str, dict[str, Any]], config["loggers"])
    handler_names: list[str] = []

    if enable_console:
        handler_configs["console"] = {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "structured" if structured else "standard",
            "filters": ["context"],
            "stream": "ext://sys.stdout",
        }
        handler_names.append("console")

    if log_file:
        handler_configs["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "structured",
            "filters": ["context"],
            "filename": log_file,
            "maxBytes": 10 * 1024 * 1024,  # 10MB
            "backupCount": 5,
            "encoding": "utf-8",
        }
        if file_handler:
            handler_configs["file"].update(
                {k: v for k, v in file_handler.items() if k in ("maxBytes", "backupCount")}
            )
        handler_names.append("file")

    for logger_config in logger_configs.values():
        logger_config["handlers"] = list(handler_names)

    logging.config.dictConfig(config)


def configure_logging(settings: Settings) -> None:
    """Configure logging from the ``logging`` settings section."""
    log_config = settings.logging
    setup_logging(
        level=log_config.level,
        log_file=log_config.file_path,
        structured=log_config.structured,
        enable_console=log_config.console_enabled,
        file_handler=log_config.get_file_handler_config(),
    )
    get_logger(__name__).debug("Logging configured: %s", settings.get_environment_info())


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the ``vitetags`` namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Manifest loaded")
    """
    full = name if name.startswith(f"{ROOT_LOGGER}.") or name == ROOT_LOGGER else (
        f"{ROOT_LOGGER}.{name}"
    )
    return logging.getLogger(full)


class LogContext:
    """Context manager for temporary logging context."""

    def __init__(self, **kwargs: Any):
        self.context: dict[str, Any] = kwargs
        self.previous_context: dict[str, Any] = {}

    def __enter__(self) -> LogContext:
        self.previous_context = context_filter.context.copy()
        context_filter.set_context(**self.context)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        context_filter.context = self.previous_context
