"""
Unit tests for the markup helpers.
"""

from bs4 import BeautifulSoup
from pageclip.extractor import serializer


class TestEscaping:
    """Test free text and attribute escaping."""

    def test_escape_text(self):
        assert serializer.escape_text("a < b & c > d") == "a &lt; b &amp; c &gt; d"

    def test_escape_text_keeps_quotes(self):
        assert serializer.escape_text('say "hi" it\'s') == 'say "hi" it\'s'

    def test_escape_text_non_breaking_space(self):
        assert serializer.escape_text("a\xa0b") == "a&nbsp;b"

    def test_escape_attribute(self):
        assert serializer.escape_attribute('x"y&z') == "x&quot;y&amp;z"


class TestSnippets:
    """Test the small markup builders."""

    def test_image(self):
        markup = serializer.image("https://pbs.twimg.com/media/A?format=jpg&name=large")
        assert markup == (
            '<p><img src="https://pbs.twimg.com/media/A?format=jpg&amp;name=large" style="max-width: 100%;"></p>'
        )

    def test_author_line_is_bold_and_escaped(self):
        markup = serializer.author_line("Tom & Jerry @tj")
        assert markup.startswith('<p style="color: #666;')
        assert "<strong>Tom &amp; Jerry @tj</strong>" in markup

    def test_separator(self):
        assert serializer.separator().startswith("<hr ")

    def test_quote_block_keeps_markup(self):
        markup = serializer.quote_block("<span>quoted</span>")
        assert markup.startswith("<blockquote ")
        assert markup.endswith("<span>quoted</span></blockquote>")


class TestTidyParagraphs:
    """Test post body clean-up."""

    def test_removes_empty_paragraphs(self):
        assert serializer.tidy_paragraphs("<p></p><p> \n </p><p>a</p>") == "<p>a</p>"

    def test_breaks_between_paragraphs(self):
        assert serializer.tidy_paragraphs("<p>a</p>  <p>b</p><p>c</p>") == "<p>a</p>\n<p>b</p>\n<p>c</p>"

    def test_leaves_inline_text_alone(self):
        assert serializer.tidy_paragraphs("plain text") == "plain text"


class TestRegionSerialization:
    """Test serialization of parsed markup."""

    def test_inner_markup_void_elements(self):
        soup = BeautifulSoup('<div><p>x</p><img src="a.png"><br></div>', "html.parser")
        assert serializer.inner_markup(soup.div) == '<p>x</p><img src="a.png"><br>'

    def test_inner_markup_escapes_text(self):
        soup = BeautifulSoup("<div>a &amp; b &lt;c&gt;</div>", "html.parser")
        assert serializer.inner_markup(soup.div) == "a &amp; b &lt;c&gt;"

    def test_inner_markup_keeps_non_breaking_spaces(self):
        soup = BeautifulSoup("<div>a&nbsp;&nbsp;b</div>", "html.parser")
        markup = serializer.inner_markup(soup.div)

        assert markup == "a&nbsp;&nbsp;b"
        assert serializer.collapse_whitespace(markup) == "a&nbsp;&nbsp;b"

    def test_collapse_whitespace(self):
        assert serializer.collapse_whitespace("\n  <p>a \t b</p>\n\n<p>c</p>  ") == "<p>a b</p> <p>c</p>"
