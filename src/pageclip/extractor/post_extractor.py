"""
Per-post extractor for social feed pages.

Feed pages render each post as its own container with the author line,
inline text and media, an action bar and an optional quoted post. Running a
region extractor over them yields a wall of buttons and counters, so each
post is walked individually instead and rebuilt as a clean fragment.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List
from urllib.parse import urljoin

import structlog
from bs4 import NavigableString, PageElement, Tag
from bs4.element import PreformattedString

from ..config.config import ExtractionSettings
from . import serializer
from .classifier import MetadataClassifier
from .models import ExtractResult, Page
from .protocols import TextClassifier

logger = structlog.get_logger(__name__)

SKIPPED_TAGS = frozenset({"script", "style"})
BLOCK_TAGS = frozenset({"p", "div"})

_NAME_PARAM = re.compile(r"name=\w+")


@dataclass
class _PostWalk:
    """Mutable state for walking a single post."""

    base_url: str
    seen: set[str] = field(default_factory=set)
    images: List[str] = field(default_factory=list)


class StructuredPostExtractor:
    """Rebuilds feed posts as ordered text and image fragments."""

    name = "structured"

    def __init__(self, settings: ExtractionSettings | None = None, classifier: TextClassifier | None = None) -> None:
        self.settings = settings or ExtractionSettings()
        self.classifier = classifier or MetadataClassifier(
            extra_labels=self.settings.extra_noise_labels,
            extra_patterns=self.settings.extra_noise_patterns,
        )
        self.logger = logger.bind(component="StructuredPostExtractor")

    def find_posts(self, document: Tag) -> List[Tag]:
        """Return the post containers of the first selector that matches any."""
        for selector in self.settings.post_selectors:
            posts = document.select(selector)
            if posts:
                self.logger.debug("Post selector matched", selector=selector, posts=len(posts))
                return posts
            self.logger.debug("Post selector matched nothing", selector=selector)
        return []

    def extract(self, page: Page) -> ExtractResult:
        return self.extract_posts(self.find_posts(page.document), page)

    def extract_posts(self, posts: List[Tag], page: Page) -> ExtractResult:
        fragments: List[str] = []
        image_count = 0

        for index, post in enumerate(posts):
            fragment, post_images = self._render_post(post, index, page.url)
            image_count += post_images
            if fragment:
                fragments.append(fragment)
            else:
                self.logger.debug("Skipping empty post", index=index)

        return ExtractResult(
            title=self._title(posts, page.title),
            content="\n".join(fragments),
            image_count=image_count,
        )

    # ------------------------------------------------------------------
    # Per-post rendering
    # ------------------------------------------------------------------

    def _render_post(self, post: Tag, index: int, base_url: str) -> tuple[str, int]:
        """Render one post; returns its fragment (possibly empty) and image count."""
        author = self._author(post)

        walk = _PostWalk(base_url=base_url)
        body = serializer.tidy_paragraphs(self._visit(post, walk))

        if not body and not walk.images:
            return "", 0

        parts: List[str] = []
        if index > 0:
            parts.append(serializer.separator())
        if author:
            parts.append(serializer.author_line(author))
        if body:
            parts.append(serializer.paragraph(body))
        parts.append(self._quote(post))
        for src in walk.images:
            markup = serializer.image(src)
            if markup not in body:
                parts.append(markup)

        return "".join(parts), len(walk.images)

    def _author(self, post: Tag) -> str:
        author_block = post.select_one(self.settings.author_selector)
        if author_block is None:
            return ""
        display_name = author_block.find("span")
        handle = author_block.select_one(self.settings.handle_selector)
        display = display_name.get_text() if display_name else ""
        if handle is not None and handle.get_text():
            return f"{display} {handle.get_text()}"
        return display

    def _quote(self, post: Tag) -> str:
        quoted = post.select_one(self.settings.quote_selector)
        if quoted is None:
            return ""
        quoted_text = quoted.select_one(self.settings.quote_text_selector)
        if quoted_text is None:
            return ""
        return serializer.quote_block(serializer.inner_markup(quoted_text))

    def _title(self, posts: List[Tag], page_title: str) -> str:
        if not posts:
            return page_title
        author_block = posts[0].select_one(self.settings.author_selector)
        display_name = author_block.find("span") if author_block else None
        if display_name is None or not display_name.get_text().strip():
            return page_title
        return display_name.get_text() + self.settings.title_suffix

    # ------------------------------------------------------------------
    # Tree walk
    # ------------------------------------------------------------------

    def _visit(self, node: PageElement, walk: _PostWalk) -> str:
        if isinstance(node, NavigableString):
            if isinstance(node, PreformattedString):
                return ""
            return self._visit_text(str(node))
        if not isinstance(node, Tag):
            return ""
        return self._visit_element(node, walk)

    def _visit_text(self, text: str) -> str:
        text = text.strip()
        if text and not self.classifier.is_metadata(text):
            return serializer.escape_text(text)
        return ""

    def _visit_element(self, element: Tag, walk: _PostWalk) -> str:
        tag = element.name.lower()

        if tag in SKIPPED_TAGS:
            return ""
        if self._is_author_block(element) or element.get("role") == "button":
            return ""
        if tag == "img":
            return self._visit_image(element, walk)

        inner = "".join(self._visit(child, walk) for child in element.children)

        if tag in BLOCK_TAGS and inner.strip():
            if "<p>" in inner or "<img" in inner:
                return inner
            return serializer.paragraph(inner)
        return inner

    def _is_author_block(self, element: Tag) -> bool:
        # Matching against the element itself, not its descendants
        return bool(element.css.match(self.settings.author_selector))

    def _visit_image(self, element: Tag, walk: _PostWalk) -> str:
        src = element.get("src") or ""
        if src:
            src = urljoin(walk.base_url, src)

        if src and self.settings.media_url_marker in src:
            src = self.normalize_media_url(src)
            if src not in walk.seen:
                walk.seen.add(src)
                walk.images.append(src)
                return serializer.image(src)
            return ""

        alt = element.get("alt")
        if alt:
            # Emoji and other glyph images carry their text in alt
            return serializer.escape_text(alt)
        return ""

    def normalize_media_url(self, src: str) -> str:
        """Request the large rendition of a media image."""
        if "name=" in src:
            return _NAME_PARAM.sub(f"name={self.settings.media_quality}", src, count=1)
        if "?" not in src:
            return f"{src}?{self.settings.media_default_query}"
        return src
