"""
Core Logger Module

Centralized logging configuration for modcatalog with optional Logfire forwarding.
"""

import logging
import logging.config
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from modcatalog.core.config import settings

ROOT_LOGGER_NAME = "modcatalog"


def _get_setting(name: str, default: Any) -> Any:
    """Get a setting with a default fallback."""
    return getattr(settings, name, default)


def get_logging_config() -> Dict[str, Any]:
    """
    Generate base logging configuration (console + file).
    The Logfire handler is attached separately via setup_logfire_handler().

    Returns:
        Dict: Base logging configuration dictionary
    """
    log_level = (_get_setting("log_level", "info") or "info").upper()

    logs_dir = Path(_get_setting("log__dir", "logs"))
    logs_dir.mkdir(exist_ok=True)

    file_path = _get_setting("log__file_path", None)
    if file_path is None:
        file_path = str(logs_dir / "modcatalog.log")

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "level": log_level,
            "formatter": "simple",
            "stream": sys.stdout,
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": _get_setting("log__file_level", "INFO"),
            "formatter": "detailed",
            "filename": file_path,
            "maxBytes": int(_get_setting("log__file_max_bytes", 10 * 1024 * 1024)),
            "backupCount": int(_get_setting("log__file_backup_count", 3)),
            "encoding": "utf-8",
        },
    }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%H:%M:%S",
            },
            "detailed": {
                "format": (
                    "%(asctime)s - %(name)s - %(levelname)s - "
                    "%(module)s:%(lineno)d - %(message)s"
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            ROOT_LOGGER_NAME: {
                "level": log_level,
                "handlers": ["console", "file"],
                "propagate": False,
            },
            # Third-party library loggers
            "uvicorn.access": {"level": "WARNING", "propagate": True},
            "sqlalchemy.engine": {"level": "WARNING", "propagate": True},
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    }


def setup_logfire_handler() -> None:
    """
    Forward application logs to Logfire.

    Must be called after logfire.configure() and after dictConfig(), otherwise
    the handler is either useless or overwritten. Safe to call repeatedly.
    """
    if not _get_setting("logfire__enabled", False):
        return

    import logfire

    app_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if any(isinstance(h, logfire.LogfireLoggingHandler) for h in app_logger.handlers):
        return

    handler = logfire.LogfireLoggingHandler(
        level=_get_setting("log_level", "info").upper()
    )
    app_logger.addHandler(handler)
    logging.getLogger(f"{ROOT_LOGGER_NAME}.logfire").info(
        "Logfire logging handler configured"
    )


@lru_cache(maxsize=1)
def setup_logging() -> None:
    """
    Set up base logging configuration (console + file handlers).
    Called once during application startup; later calls are no-ops.
    """
    logging.config.dictConfig(get_logging_config())

    logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.startup")
    logger.info(
        "Logging system initialized - Environment: %s, Level: %s, Logfire: %s",
        _get_setting("environment", "production"),
        _get_setting("log_level", "info"),
        _get_setting("logfire__enabled", False),
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with automatic 'modcatalog' prefix.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        Logger: Configured logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("This is an info message")
    """
    setup_logging()

    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)
