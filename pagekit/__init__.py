"""Helpers for serving templated web pages."""

from importlib.metadata import PackageNotFoundError, version

from pagekit.config import Settings, get_settings
from pagekit.exceptions import ConfigurationError, ErrorCode, PagesError, TemplateLoadError
from pagekit.logging_config import configure_logging, request_logger, setup_logging
from pagekit.page import Page
from pagekit.pages import Pages
from pagekit.result import (
    STATUS_BAD_REQUEST,
    STATUS_INTERNAL_ERROR,
    STATUS_NOT_FOUND,
    STATUS_UNAUTHORIZED,
    Disposition,
    Result,
    bad_request_with,
    internal_error_with,
    redirect_with,
    status_ok,
    unauthorized_with,
)
from pagekit.values import Values

try:
    __version__ = version("pagekit")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "ConfigurationError",
    "Disposition",
    "ErrorCode",
    "Page",
    "Pages",
    "PagesError",
    "Result",
    "STATUS_BAD_REQUEST",
    "STATUS_INTERNAL_ERROR",
    "STATUS_NOT_FOUND",
    "STATUS_UNAUTHORIZED",
    "Settings",
    "TemplateLoadError",
    "Values",
    "bad_request_with",
    "configure_logging",
    "get_settings",
    "internal_error_with",
    "redirect_with",
    "request_logger",
    "setup_logging",
    "status_ok",
    "unauthorized_with",
]
