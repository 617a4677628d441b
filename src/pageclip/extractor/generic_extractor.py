"""
Selector-based content region extractor for arbitrary pages.
"""

from __future__ import annotations

import copy
from urllib.parse import urljoin

import structlog
from bs4 import Tag

from ..config.config import ExtractionSettings
from . import serializer
from .models import ExtractResult, Page

logger = structlog.get_logger(__name__)


class GenericRegionExtractor:
    """Extractor that serializes the most likely content container of a page."""

    name = "generic"

    def __init__(self, settings: ExtractionSettings | None = None) -> None:
        self.settings = settings or ExtractionSettings()
        self.logger = logger.bind(component="GenericRegionExtractor")

    def extract(self, page: Page) -> ExtractResult:
        """Extract the main content region of a page.

        Args:
            page: Page to extract from; its tree is left untouched

        Returns:
            ExtractResult with the cleaned region markup and the page title
        """
        region = self.select_region(page.document)

        # Work on a copy, the caller still owns the live tree
        clone = copy.copy(region)

        self._strip_non_content(clone)
        image_count = self._absolutize_images(clone, page)

        content = serializer.collapse_whitespace(serializer.inner_markup(clone))

        self.logger.debug("Generic extraction finished", url=page.url, length=len(content), images=image_count)

        return ExtractResult(title=page.title, content=content, image_count=image_count)

    def select_region(self, document: Tag) -> Tag:
        """Return the first content container match, falling back to ``<body>``."""
        for selector in self.settings.content_selectors:
            region = document.select_one(selector)
            if region is not None:
                self.logger.debug("Content selector matched", selector=selector)
                return region

        body = document.find("body")
        if isinstance(body, Tag):
            self.logger.debug("No content selector matched, using body")
            return body
        return document

    def _strip_non_content(self, region: Tag) -> None:
        for selector in self.settings.strip_selectors:
            for element in region.select(selector):
                # Nested matches go away with their ancestor
                if not element.decomposed:
                    element.decompose()

    def _absolutize_images(self, region: Tag, page: Page) -> int:
        image_count = 0
        for img in region.find_all("img"):
            src = img.get("src")
            if src:
                img["src"] = self.absolutize(src, page)
                image_count += 1

            for attribute in self.settings.image_hint_attributes:
                if attribute in img.attrs:
                    del img[attribute]
        return image_count

    @staticmethod
    def absolutize(src: str, page: Page) -> str:
        """Resolve an image reference against the page location."""
        if src.startswith("//"):
            return f"{page.scheme}:{src}"
        if src.startswith("/"):
            return page.origin + src
        if not src.startswith(("http://", "https://")):
            return urljoin(page.url, src)
        return src
