"""
Data models for extraction input and results.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

from bs4 import BeautifulSoup, Tag

_WHITESPACE = re.compile(r"\s+")


class Strategy(enum.Enum):
    """Extraction path chosen for a page."""

    STRUCTURED = "structured"
    GENERIC = "generic"


@dataclass(slots=True, frozen=True)
class Page:
    """A parsed page as handed over by the caller.

    ``document`` is the live node tree. The structured path only reads it and
    the generic path works on a copy, so it is never modified.
    """

    document: Tag
    url: str
    title: str = ""

    @classmethod
    def from_html(
        cls, html: str | bytes, url: str, title: str | None = None, *, parser: str = "html.parser"
    ) -> Page:
        """Parse markup into a page, taking the title from ``<title>`` when not given.

        Bytes are decoded by BeautifulSoup, which detects the document encoding.
        """
        document = BeautifulSoup(html, parser)
        if title is None:
            title_tag = document.find("title")
            title = _WHITESPACE.sub(" ", title_tag.get_text()).strip() if title_tag else ""
        return cls(document=document, url=url, title=title)

    @property
    def host(self) -> str:
        return (urlsplit(self.url).hostname or "").lower()

    @property
    def scheme(self) -> str:
        return urlsplit(self.url).scheme or "https"

    @property
    def origin(self) -> str:
        parts = urlsplit(self.url)
        return f"{parts.scheme}://{parts.netloc}"


@dataclass(slots=True, frozen=True)
class ExtractResult:
    """Result of page content extraction."""

    title: str
    content: str  # serialized markup fragment
    image_count: int

    def __post_init__(self) -> None:
        """Validate the result."""
        if self.image_count < 0:
            raise ValueError("image_count must not be negative")

    @property
    def is_empty(self) -> bool:
        return not self.content.strip()

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "content": self.content, "imageCount": self.image_count}

    def to_manual_article(self, source: str, title: str | None = None) -> dict[str, str]:
        """Build the manual-article payload for a reading-list service.

        A non-blank ``title`` wins over the extracted one; ``"Untitled"`` is
        used when both are blank.
        """
        chosen = (title or "").strip() or self.title or "Untitled"
        return {"title": chosen, "content": self.content, "source": source}
