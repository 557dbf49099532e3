"""Pytest configuration and shared fixtures."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from pagekit.config import Settings
from pagekit.logging_config import request_logger
from pagekit.pages import Pages

BASE_TEMPLATE = '<html><head><title>{{ title }}</title></head><body>{% include "content" %}</body></html>'
CONTENT_TEMPLATE = "<p>{{ message }}</p>"


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Directory holding a base template that includes a content template."""
    directory = tmp_path / "tmpl"
    directory.mkdir()
    (directory / "base.html").write_text(BASE_TEMPLATE, encoding="utf-8")
    (directory / "content.html").write_text(CONTENT_TEMPLATE, encoding="utf-8")
    return directory


@pytest.fixture
def write_template(template_dir: Path):
    """Write an extra template file into the template directory."""

    def _write(name: str, source: str) -> Path:
        path = template_dir / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def settings(template_dir: Path) -> Settings:
    """Settings resolving template paths against the test template directory."""
    return Settings(template_dir=template_dir)


@pytest.fixture
def mock_logger():
    """Request logger recording every call."""
    return MagicMock()


@pytest.fixture
def mock_logger_factory(mock_logger):
    """Logger factory always returning mock_logger."""
    return MagicMock(return_value=mock_logger)


@pytest.fixture
def pages(settings: Settings, mock_logger_factory) -> Pages:
    """Page registry with recording logger factory."""
    return Pages(logger_factory=mock_logger_factory, settings=settings)


@pytest.fixture
def logging_pages(settings: Settings) -> Pages:
    """Page registry using the default request logger."""
    return Pages(logger_factory=request_logger, settings=settings)


@pytest.fixture
def make_client():
    """Build a TestClient for a FastAPI app serving the given pages."""

    def _make(registry: Pages) -> TestClient:
        app = FastAPI()
        registry.register(app)
        return TestClient(app)

    return _make
