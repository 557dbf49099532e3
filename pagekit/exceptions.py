"""Custom exceptions for pagekit startup and configuration errors."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error reporting."""

    PAGES_ERROR = "PAGES_ERROR"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_MISSING = "CONFIG_MISSING"
    CONFIG_INVALID = "CONFIG_INVALID"

    # Template errors
    TEMPLATE_ERROR = "TEMPLATE_ERROR"
    TEMPLATE_MISSING = "TEMPLATE_MISSING"
    TEMPLATE_SYNTAX = "TEMPLATE_SYNTAX"
    TEMPLATE_ENCODING = "TEMPLATE_ENCODING"


class PagesError(Exception):
    """Base exception for pagekit errors.

    These are raised while the application is being wired up (building
    pages, loading templates, checking configuration). Per-request failures
    never surface as exceptions; they are logged and turned into generic
    HTTP responses by the page itself.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.PAGES_ERROR,
        details: dict[str, Any] | None = None,
    ):
        """Initialize pagekit exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(PagesError):
    """Configuration errors, e.g. a missing logger factory."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class TemplateLoadError(PagesError):
    """Page templates could not be read or parsed."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.TEMPLATE_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)
