"""
Unit tests for extraction models.
"""

import pytest
from pageclip.extractor.models import ExtractResult, Page, Strategy


class TestPage:
    """Test cases for Page."""

    def test_from_html_reads_title(self):
        page = Page.from_html("<html><head><title>\n  My   Article\n</title></head></html>", "https://example.com/")
        assert page.title == "My Article"

    def test_from_html_without_title(self):
        page = Page.from_html("<p>no head</p>", "https://example.com/")
        assert page.title == ""

    def test_explicit_title_wins(self):
        page = Page.from_html("<title>Doc</title>", "https://example.com/", title="Given")
        assert page.title == "Given"

    def test_from_html_accepts_bytes(self):
        page = Page.from_html("<title>Caf\u00e9</title><p>na\u00efve</p>".encode("utf-8"), "https://example.com/")
        assert page.title == "Caf\u00e9"
        assert page.document.p.get_text() == "na\u00efve"

    def test_location_parts(self):
        page = Page.from_html("", "https://Mobile.X.com:8443/alice/status/1?s=20")
        assert page.host == "mobile.x.com"
        assert page.scheme == "https"
        assert page.origin == "https://Mobile.X.com:8443"

    def test_http_scheme(self):
        assert Page.from_html("", "http://example.com/x").scheme == "http"


class TestExtractResult:
    """Test cases for ExtractResult."""

    def test_to_dict(self):
        result = ExtractResult(title="T", content="<p>c</p>", image_count=2)
        assert result.to_dict() == {"title": "T", "content": "<p>c</p>", "imageCount": 2}

    def test_negative_image_count_rejected(self):
        with pytest.raises(ValueError):
            ExtractResult(title="T", content="", image_count=-1)

    def test_is_frozen(self):
        result = ExtractResult(title="T", content="", image_count=0)
        with pytest.raises(AttributeError):
            result.title = "other"  # type: ignore[misc]

    @pytest.mark.parametrize("content,empty", [("", True), ("  \n ", True), ("<p>x</p>", False)])
    def test_is_empty(self, content, empty):
        assert ExtractResult(title="T", content=content, image_count=0).is_empty is empty

    def test_manual_article_title_precedence(self):
        result = ExtractResult(title="Extracted", content="<p>c</p>", image_count=0)
        source = "https://example.com/a"

        assert result.to_manual_article(source, "  Custom ")["title"] == "Custom"
        assert result.to_manual_article(source, "   ")["title"] == "Extracted"
        assert result.to_manual_article(source) == {"title": "Extracted", "content": "<p>c</p>", "source": source}

        untitled = ExtractResult(title="", content="<p>c</p>", image_count=0)
        assert untitled.to_manual_article(source)["title"] == "Untitled"


def test_strategy_values():
    assert {s.value for s in Strategy} == {"structured", "generic"}
