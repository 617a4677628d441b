"""
Markup helpers shared by the extractors.

Everything emitted by the structured path goes through these functions, so
the tag set stays limited to p, img, strong, blockquote, hr and br, and all
free text is escaped.
"""

from __future__ import annotations

import html
import re

from bs4 import Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

IMAGE_STYLE = "max-width: 100%;"
AUTHOR_STYLE = "color: #666; margin-bottom: 5px;"
SEPARATOR_STYLE = "border: none; border-top: 1px solid #eee; margin: 20px 0;"
QUOTE_STYLE = "border-left: 3px solid #ccc; padding-left: 10px; margin: 10px 0;"

def _substitute_entities(value: str) -> str:
    # Non-breaking spaces stay entities so whitespace collapsing keeps them
    return EntitySubstitution.substitute_xml(value).replace("\xa0", "&nbsp;")


# Minimal entity escaping, void elements without the XHTML slash
MARKUP_FORMATTER = HTMLFormatter(
    entity_substitution=_substitute_entities,
    void_element_close_prefix=None,
)

_EMPTY_PARAGRAPH = re.compile(r"<p>\s*</p>")
_PARAGRAPH_BOUNDARY = re.compile(r"(</p>)\s*(<p>)")
_WHITESPACE = re.compile(r"\s+")


def escape_text(text: str) -> str:
    """Escape free text for use between tags."""
    return html.escape(text, quote=False).replace("\xa0", "&nbsp;")


def escape_attribute(value: str) -> str:
    return html.escape(value, quote=True)


def paragraph(inner: str) -> str:
    return f"<p>{inner}</p>"


def image(src: str) -> str:
    return f'<p><img src="{escape_attribute(src)}" style="{IMAGE_STYLE}"></p>'


def author_line(author: str) -> str:
    return f'<p style="{AUTHOR_STYLE}"><strong>{escape_text(author)}</strong></p>'


def separator() -> str:
    return f'<hr style="{SEPARATOR_STYLE}">'


def quote_block(inner_markup: str) -> str:
    return f'<blockquote style="{QUOTE_STYLE}">{inner_markup}</blockquote>'


def tidy_paragraphs(fragment: str) -> str:
    """Drop empty paragraphs and start each paragraph on its own line."""
    fragment = _EMPTY_PARAGRAPH.sub("", fragment)
    return _PARAGRAPH_BOUNDARY.sub("\\1\n\\2", fragment)


def inner_markup(tag: Tag) -> str:
    return tag.decode_contents(formatter=MARKUP_FORMATTER)


def collapse_whitespace(markup: str) -> str:
    return _WHITESPACE.sub(" ", markup).strip()
