"""Extract article metadata from the document head and byline."""

from __future__ import annotations

from typing import Any

from .utils import _text

UNTITLED = "Untitled Article"

# Selectors tried in order; the first element with text wins.
TITLE_SELECTORS = ("h1", '[class*="title"]', "title")
AUTHOR_SELECTORS = (
    '[rel="author"]',
    ".author",
    ".byline",
    '[class*="author"]',
    '[itemprop="author"]',
)
DATE_SELECTORS = (
    "time[datetime]",
    '[itemprop="datePublished"]',
    ".publish-date",
    ".post-date",
    '[class*="date"]',
)


def _first_text(
    soup: Any, selectors: tuple[str, ...]  # noqa: ANN401
) -> str | None:
    """Return the text of the first selector match that has any."""

    for selector in selectors:
        tag = soup.select_one(selector)
        if tag is None:
            continue

        text = _text(tag)
        if text:
            return text

    return None


def extract_title(soup: Any) -> str:  # noqa: ANN401
    """Return the article headline or ``"Untitled Article"``."""

    return _first_text(soup, TITLE_SELECTORS) or UNTITLED


def extract_author(soup: Any) -> str | None:  # noqa: ANN401
    """Return the author name, ``None`` when the page names nobody."""

    return _first_text(soup, AUTHOR_SELECTORS)


def extract_publish_date(soup: Any) -> str | None:  # noqa: ANN401
    """Return the raw publication date of the article.

    A machine readable ``datetime`` attribute is preferred over the visible
    text of the matching element.

    Args:
        soup: Parsed document.

    Returns:
        Date string exactly as found in the page, or ``None``.
    """

    for selector in DATE_SELECTORS:
        tag = soup.select_one(selector)
        if tag is None:
            continue

        # Prefer the ISO value over the human readable label.
        datetime_value = str(tag.get("datetime") or "").strip()
        if datetime_value:
            return datetime_value

        text = _text(tag)
        if text:
            return text

    return None
