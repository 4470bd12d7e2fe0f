"""Plain-text excerpts of HTML descriptions."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup


ELLIPSIS = "..."
_NEWLINE_RE = re.compile(r"\r\n|\n|\r")

# Elements that start a new line; inline elements keep their text runs joined
BLOCK_TAGS = [
    "address", "article", "aside", "blockquote", "dd", "div", "dl", "dt",
    "figcaption", "figure", "footer", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "hr", "li", "main", "nav", "ol", "p", "pre", "section",
    "table", "td", "th", "tr", "ul",
]


def html_to_text(markup: str) -> str:
    """Strip markup, keeping one line per text block and dropping blank lines."""
    soup = BeautifulSoup(markup or "", "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    for br in soup("br"):
        br.replace_with("\n")
    for tag in soup(BLOCK_TAGS):
        tag.insert_before("\n")
        tag.insert_after("\n")
    text = soup.get_text()
    return "\n".join(line.strip() for line in text.splitlines() if line.strip())


def truncate(text: str, max_chars: int, ellipsis: str = ELLIPSIS) -> str:
    """Return a single-line excerpt of at most ``max_chars`` characters.

    The ellipsis is only appended when the plain text was actually cut,
    after trailing whitespace is trimmed from the cut.

    Args:
        text: Description text, may contain HTML markup
        max_chars: Maximum characters kept before the ellipsis
        ellipsis: Marker appended to shortened excerpts

    Returns:
        The excerpt with every newline variant replaced by a space
    """
    plain = html_to_text(text)
    excerpt = plain[:max_chars]
    if len(plain) > max_chars:
        excerpt = excerpt.rstrip() + ellipsis
    return _NEWLINE_RE.sub(" ", excerpt)
