"""
Shared test configuration for pageclip.

Provides page builders used across the extractor, manager and CLI tests.
Feed markup helpers live in ``tests.helpers``.
"""

import logging
from typing import Callable, Optional

import pytest
import structlog
from pageclip.extractor.models import Page

from tests.helpers import PAGE_URL


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


@pytest.fixture
def make_page() -> Callable[..., Page]:
    """Factory for parsed pages; the title defaults to the document's <title>."""

    def _make(html: str, url: str = PAGE_URL, title: Optional[str] = None) -> Page:
        return Page.from_html(html, url, title)

    return _make


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration done by CLI tests."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
