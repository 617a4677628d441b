"""
ExtractorManager for pageclip.

Chooses between the per-post extractor and the generic region extractor for
each page and falls back to the generic path when no posts are found.
"""

from __future__ import annotations

import structlog

from ..config.config import ExtractionSettings
from .generic_extractor import GenericRegionExtractor
from .models import ExtractResult, Page, Strategy
from .post_extractor import StructuredPostExtractor

logger = structlog.get_logger(__name__)


class ExtractorManager:
    """
    Dispatches a page to the extraction strategy that fits it.

    Hosts on the ``structured_hosts`` allow-list (or their subdomains) get the
    per-post extractor; feed markup changes often, so when none of the post
    selectors match the page is handed to the generic extractor instead.
    """

    def __init__(self, settings: ExtractionSettings | None = None) -> None:
        """
        Initialize the ExtractorManager.

        Args:
            settings: Extraction configuration settings
        """
        self.settings = settings or ExtractionSettings()
        self.logger = logger.bind(component="ExtractorManager")

        self.structured = StructuredPostExtractor(self.settings)
        self.generic = GenericRegionExtractor(self.settings)

    def select_strategy(self, host: str) -> Strategy:
        """
        Determine the extraction strategy for a host.

        Args:
            host: Hostname of the page, e.g. ``mobile.x.com``

        Returns:
            Strategy.STRUCTURED for allow-listed hosts, Strategy.GENERIC otherwise
        """
        host = host.lower().rstrip(".")
        for domain in self.settings.structured_hosts:
            # Exact match or subdomain ("mobile.x.com" matches "x.com")
            if host == domain or host.endswith(f".{domain}"):
                return Strategy.STRUCTURED
        return Strategy.GENERIC

    def extract(self, page: Page) -> ExtractResult:
        """
        Extract content from a page.

        Args:
            page: Parsed page with its location and title

        Returns:
            ExtractResult; ``content`` is empty when nothing was extractable
        """
        strategy = self.select_strategy(page.host)

        self.logger.info("Starting extraction", url=page.url, host=page.host, strategy=strategy.value)

        if strategy is Strategy.STRUCTURED:
            posts = self.structured.find_posts(page.document)
            if posts:
                result = self.structured.extract_posts(posts, page)
                self._log_result(page, Strategy.STRUCTURED, result, posts=len(posts))
                return result

            self.logger.info(
                "No posts found, falling back to generic extraction",
                url=page.url,
                selectors=self.settings.post_selectors,
            )

        result = self.generic.extract(page)
        self._log_result(page, Strategy.GENERIC, result)
        return result

    def _log_result(self, page: Page, strategy: Strategy, result: ExtractResult, **extra: int) -> None:
        if result.is_empty:
            self.logger.warning("Extraction produced no content", url=page.url, strategy=strategy.value)
            return
        self.logger.info(
            "Extraction completed",
            url=page.url,
            strategy=strategy.value,
            title=result.title,
            content_length=len(result.content),
            image_count=result.image_count,
            **extra,
        )


def extract_page(page: Page, settings: ExtractionSettings | None = None) -> ExtractResult:
    """Extract a page with a one-off manager."""
    return ExtractorManager(settings).extract(page)
