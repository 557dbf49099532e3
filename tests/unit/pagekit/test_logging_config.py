"""Tests for logging configuration."""

import json
import logging

import pytest
from starlette.requests import Request

from pagekit.config import Settings
from pagekit.logging_config import (
    RequestLoggerAdapter,
    configure_logging,
    get_logger,
    log_with_context,
    redact_sensitive_data,
    request_logger,
    setup_logging,
)


def make_request(path: str = "/", query: bytes = b"") -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "scheme": "http",
            "server": ("testserver", 80),
            "path": path,
            "query_string": query,
            "headers": [(b"host", b"testserver")],
            "client": ("10.0.0.5", 5000),
        }
    )


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_console_only(restore_root_logger):
    """Test setup without a log file installs a single console handler."""
    root = setup_logging("warning")

    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_setup_logging_writes_json_file(tmp_path, restore_root_logger):
    """Test the JSON file handler writes structured records."""
    log_file = tmp_path / "logs" / "pages.log"
    setup_logging("INFO", log_file=log_file)

    log_with_context(get_logger("pagekit.test"), "info", "Page served", page="/home")
    for handler in logging.getLogger().handlers:
        handler.flush()

    record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert record["message"] == "Page served"
    assert record["page"] == "/home"
    assert record["levelname"] == "INFO"


def test_log_with_context_passes_extra(caplog):
    """Test context fields are attached to the record."""
    logger = get_logger("pagekit.test")

    with caplog.at_level(logging.WARNING, logger="pagekit.test"):
        log_with_context(logger, "warning", "Something odd", event_type="odd")

    assert caplog.records[-1].event_type == "odd"
    assert caplog.records[-1].levelname == "WARNING"


def test_redact_sensitive_data():
    """Test sensitive query parameters are masked."""
    url = "http://testserver/cb?code=1&access_token=abc123&api_key=xyz"

    redacted = redact_sensitive_data(url)

    assert "abc123" not in redacted
    assert "xyz" not in redacted
    assert "access_token=***REDACTED***" in redacted
    assert "code=1" in redacted


def test_request_logger_binds_request_fields(caplog):
    """Test the default factory binds method, redacted URL and client."""
    logger = request_logger(make_request("/account", b"token=secret"))

    assert isinstance(logger, RequestLoggerAdapter)
    with caplog.at_level(logging.INFO, logger="pagekit.request"):
        logger.info("hello %s", "world")

    record = caplog.records[-1]
    assert record.getMessage() == "hello world"
    assert record.method == "GET"
    assert record.client == "10.0.0.5"
    assert "secret" not in record.url
    assert record.url.startswith("http://testserver/account")


def test_request_logger_merges_call_extra(caplog):
    """Test per-call fields are merged with the bound request fields."""
    logger = request_logger(make_request("/"))

    with caplog.at_level(logging.ERROR, logger="pagekit.request"):
        log_with_context(logger, "error", "Render failed", page="/")

    record = caplog.records[-1]
    assert record.page == "/"
    assert record.method == "GET"


def test_setup_logging_leaves_uvicorn_alone(restore_root_logger):
    """Test only the httpx logger is quieted."""
    uvicorn_access = logging.getLogger("uvicorn.access")
    uvicorn_access.setLevel(logging.NOTSET)

    setup_logging("INFO")

    assert uvicorn_access.level == logging.NOTSET
    assert logging.getLogger("httpx").level == logging.WARNING


def test_configure_logging_from_settings(tmp_path, restore_root_logger):
    """Test settings drive the log level and JSON log file."""
    log_file = tmp_path / "pages.log"
    root = configure_logging(Settings(log_level="error", log_file=log_file))

    assert root.level == logging.ERROR
    get_logger("pagekit.test").warning("not written")
    log_with_context(get_logger("pagekit.test"), "error", "Template failed", page="/")
    for handler in root.handlers:
        handler.flush()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["message"] == "Template failed"


def test_configure_logging_without_file(restore_root_logger):
    """Test default settings log to the console only."""
    root = configure_logging(Settings())

    assert root.level == logging.INFO
    assert [type(h) for h in root.handlers] == [logging.StreamHandler]


@pytest.mark.parametrize(
    "url",
    [
        "http://h/?monkey=banana",
        "http://h/?turnkey=1&hotkey=2",
        "http://h/?mytoken=abc&nosecret=x",
    ],
)
def test_redact_keeps_params_ending_in_sensitive_word(url):
    """Test only whole parameter names are redacted."""
    assert redact_sensitive_data(url) == url


def test_redact_first_and_later_params():
    """Test sensitive names are matched after ? and after &."""
    redacted = redact_sensitive_data("http://h/?key=k1&page=2&token=t1")

    assert redacted == "http://h/?key=***REDACTED***&page=2&token=***REDACTED***"
