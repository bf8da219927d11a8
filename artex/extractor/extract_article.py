"""Extract a structured article from raw HTML."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from .article_document import ArticleDocument
from .content_parser import fallback_content, parse_content
from .locator import find_main_content
from .metadata import extract_author, extract_publish_date, extract_title
from .paragraph import Paragraph
from .sanitizer import remove_boilerplate

logger = logging.getLogger(__name__)

# The container parse is replaced when it yields fewer elements than this.
FALLBACK_THRESHOLD = 5

PLACEHOLDER_TEXT = (
    "Unable to extract content from this URL. "
    "The page structure may not be supported."
)


def extract_article(html: str) -> ArticleDocument:
    """Extract a structured article from raw HTML.

    The page is never rejected: when the located container yields too
    little content the whole document is scanned, and when that finds
    nothing a placeholder paragraph is returned.

    Args:
        html: Raw HTML of the page.

    Returns:
        The extracted article.

    Throws:
        TypeError: If ``html`` is not a string.
    """

    if not isinstance(html, str):
        raise TypeError(
            f"html must be a string, not {type(html).__name__}"
        )

    logger.debug("Extracting article from %d characters of HTML", len(html))

    # Metadata is read before page furniture such as headers is removed.
    original = BeautifulSoup(html, "html.parser")
    title = extract_title(original)
    author = extract_author(original)
    publish_date = extract_publish_date(original)
    logger.debug("Article title: %s", title)

    soup = BeautifulSoup(html, "html.parser")
    remove_boilerplate(soup)

    container = find_main_content(soup)
    content = parse_content(container, title)
    logger.debug("Main content yielded %d elements", len(content))

    if len(content) < FALLBACK_THRESHOLD:
        content = fallback_content(soup, title)
        logger.debug("Fallback extraction yielded %d elements", len(content))

    if not content:
        logger.warning("No content found, using placeholder paragraph")
        content = [Paragraph(text=PLACEHOLDER_TEXT)]

    return ArticleDocument(
        title=title,
        content=content,
        author=author,
        publish_date=publish_date,
    )
