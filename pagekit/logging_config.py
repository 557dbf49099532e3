"""Logging configuration for pagekit.

Console output is human-readable; an optional JSON log file (10MB rotation,
5 backups) carries the structured context fields attached to each record.
Pages log through a per-request logger obtained from a logger factory;
``request_logger`` is the default factory.
"""

import logging
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger
from starlette.requests import Request

from pagekit.config import Settings
from pagekit.protocols import RequestLogger

# Sensitive parameters to redact from logged URLs
SENSITIVE_PARAMS = [
    "api_key",
    "token",
    "password",
    "secret",
    "key",
    "refresh_token",
    "access_token",
    "client_secret",
    "auth_token",
    "authorization",
    "bearer",
]


def setup_logging(log_level: str = "INFO", log_file: Path | None = None) -> logging.Logger:
    """Configure console logging and, optionally, JSON file logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path of the JSON log file; no file handler when None

    Returns:
        Configured root logger instance
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Remove any existing handlers
    root_logger.handlers.clear()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        json_formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d",
            timestamp=True,
        )
        json_handler.setFormatter(json_formatter)
        json_handler.setLevel(logging.DEBUG)  # Capture all levels to file
        root_logger.addHandler(json_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return root_logger


def configure_logging(settings: Settings) -> logging.Logger:
    """Configure logging from page settings.

    Call once at application startup, before serving:

        configure_logging(get_settings())

    Args:
        settings: Settings providing log_level and log_file

    Returns:
        Configured root logger instance
    """
    return setup_logging(settings.log_level, settings.log_file)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with structured logging support.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance configured for structured logging
    """
    return logging.getLogger(name)


def log_with_context(
    logger: RequestLogger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with additional structured context fields.

    Args:
        logger: Logger or request logger adapter
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **extra_fields: Additional fields to include in JSON log (e.g., url, page)
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=extra_fields)


def redact_sensitive_data(url: str) -> str:
    """Redact sensitive query parameters from URL."""
    redacted = url
    for param in SENSITIVE_PARAMS:
        pattern = rf"(?<=[?&]){param}=([^&\s\"]+)"
        redacted = re.sub(pattern, f"{param}=***REDACTED***", redacted)
    return redacted


class RequestLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter carrying request fields on every record.

    Fields passed through ``extra`` on a single call are merged over the
    bound request fields instead of replacing them.
    """

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        kwargs["extra"] = {**(self.extra or {}), **kwargs.get("extra", {})}
        return msg, kwargs


def request_logger(request: Request) -> RequestLoggerAdapter:
    """Default logger factory: a logger bound to the incoming request.

    Args:
        request: Incoming request

    Returns:
        Adapter that adds method, redacted URL and client host to each record
    """
    client = request.client.host if request.client else None
    return RequestLoggerAdapter(
        get_logger("pagekit.request"),
        {
            "method": request.method,
            "url": redact_sensitive_data(str(request.url)),
            "client": client,
        },
    )
