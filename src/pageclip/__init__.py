"""
pageclip - Readable article extraction from rendered pages.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Config
from .extractor import ExtractorManager, ExtractResult, Page, extract_page

__all__ = ["__version__", "Config", "ExtractorManager", "ExtractResult", "Page", "extract_page"]
