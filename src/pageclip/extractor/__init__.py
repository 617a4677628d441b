"""
pageclip Content Extraction Module - Feed-Aware Page Extractor

Two strategies share one result shape:
1. Structured: per-post walk for social feed pages (author line, inline text
   and media, quoted posts, deduplicated images, UI chrome dropped)
2. Generic: best content region by selector preference, with non-content
   subtrees removed and image references made absolute

The ExtractorManager picks a strategy from the page host and falls back to
the generic path when no posts are found.
"""

from .classifier import MetadataClassifier, is_metadata
from .generic_extractor import GenericRegionExtractor
from .manager import ExtractorManager, extract_page
from .models import ExtractResult, Page, Strategy
from .post_extractor import StructuredPostExtractor
from .protocols import Extractor, TextClassifier

__all__ = [
    "ExtractorManager",
    "extract_page",
    "GenericRegionExtractor",
    "StructuredPostExtractor",
    "MetadataClassifier",
    "is_metadata",
    "ExtractResult",
    "Page",
    "Strategy",
    "Extractor",
    "TextClassifier",
]
