"""
Protocols for pluggable page extraction strategies.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import ExtractResult, Page


@runtime_checkable
class Extractor(Protocol):
    """Pluggable Page-to-ExtractResult strategy."""

    name: str

    def extract(self, page: Page) -> ExtractResult:
        """Extract content from a parsed page.

        Args:
            page: Page to extract from

        Returns:
            ExtractResult with extracted content
        """
        ...


@runtime_checkable
class TextClassifier(Protocol):
    """Decides whether a text fragment is page chrome rather than content."""

    def is_metadata(self, text: str) -> bool: ...
