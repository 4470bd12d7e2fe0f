"""Tests for plain-text excerpts."""

from mobilizon_newsletter.core.text import html_to_text, truncate


def test_truncate_short_text_has_no_ellipsis():
    assert truncate("<p>Come <b>along</b></p>", 256) == "Come along"


def test_truncate_exact_length_has_no_ellipsis():
    assert truncate("abcd", 4) == "abcd"


def test_truncate_long_text_appends_ellipsis():
    result = truncate("a" * 300, 256)

    assert result == "a" * 256 + "..."


def test_truncate_trims_whitespace_before_ellipsis():
    assert truncate("abc def", 4) == "abc..."


def test_truncate_counts_plain_text_not_markup():
    markup = '<p><a href="https://example.com/a/very/long/link">short</a></p>'

    assert truncate(markup, 10) == "short"


def test_truncate_collapses_newline_variants():
    assert truncate("line1\r\nline2\rline3\nline4", 100) == "line1 line2 line3 line4"


def test_truncate_output_is_single_line_and_bounded():
    markup = "<p>" + "word " * 100 + "</p><p>second paragraph</p>"

    result = truncate(markup, 50)

    assert "\n" not in result and "\r" not in result
    assert result.endswith("...")
    assert len(result[: -len("...")]) <= 50


def test_html_to_text_drops_scripts_and_blank_lines():
    markup = "<div><script>alert(1)</script><p>One</p>\n\n<p>Two</p></div>"

    assert html_to_text(markup) == "One\nTwo"


def test_html_to_text_handles_empty_input():
    assert html_to_text("") == ""
    assert truncate("", 10) == ""


def test_html_to_text_keeps_inline_runs_together():
    markup = "<p>un<b>believ</b>able, see <a href='x'>here</a>.</p>"

    assert truncate(markup, 100) == "unbelievable, see here."


def test_html_to_text_breaks_on_blocks_and_br():
    markup = "<h2>Title</h2><p>First<br>second</p><ul><li>one</li><li><em>two</em></li></ul>"

    assert html_to_text(markup) == "Title\nFirst\nsecond\none\ntwo"
