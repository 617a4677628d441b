"""
Noise filter for social feed pages.

Feed markup interleaves post text with UI chrome: follow buttons, engagement
counters, timestamps, translation prompts. None of it is structurally marked,
so it is recognised by its literal text. The lists below come from observed
page chrome and are English-only.
"""

from __future__ import annotations

import re
from typing import Iterable, Pattern, Sequence

UI_LABELS = frozenset(
    {
        "Follow",
        "Following",
        "Show more",
        "Show less",
        "Translate post",
        "Translated from",
        "·",  # middle dot separator
    }
)

# Matched against the whole fragment
FULL_MATCH_PATTERNS: tuple[Pattern[str], ...] = (
    re.compile(r"@\w+", re.ASCII),  # handle
    re.compile(r"\d+(\.\d+)?[KMB]?", re.ASCII),  # engagement count
    re.compile(r"(Reply|Repost|Like|Share|Bookmark|Views?)", re.IGNORECASE),
    re.compile(r"[0-9]{1,2}:[0-9]{2}\s*(AM|PM)?", re.IGNORECASE),  # clock time
)

# Matched against the start of the fragment ("Mar 4", "Mar 4, 2024")
PREFIX_PATTERNS: tuple[Pattern[str], ...] = (
    re.compile(r"(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)\s+[0-9]+", re.IGNORECASE),
)


class MetadataClassifier:
    """Classifies short text fragments as UI chrome or real content."""

    def __init__(
        self,
        extra_labels: Iterable[str] = (),
        extra_patterns: Sequence[str] = (),
    ) -> None:
        self.labels = UI_LABELS | frozenset(extra_labels)
        self.full_match_patterns = FULL_MATCH_PATTERNS + tuple(re.compile(p) for p in extra_patterns)
        self.prefix_patterns = PREFIX_PATTERNS

    def is_metadata(self, text: str) -> bool:
        if text in self.labels:
            return True
        if any(pattern.fullmatch(text) for pattern in self.full_match_patterns):
            return True
        return any(pattern.match(text) for pattern in self.prefix_patterns)


_default = MetadataClassifier()


def is_metadata(text: str) -> bool:
    """Return True if ``text`` is UI chrome with the built-in rules."""
    return _default.is_metadata(text)
