"""Locate the element that holds the article body."""

from __future__ import annotations

import logging
from typing import Any

from bs4 import BeautifulSoup

from .boilerplate import PENALTY_PHRASES, contains_any
from .utils import _text

logger = logging.getLogger(__name__)

# Selectors that name the article body directly, in order of preference.
CONTENT_SELECTORS = (
    "article",
    '[role="main"]',
    "main",
    ".article-content",
    ".post-content",
    ".entry-content",
    ".content",
    "#content",
)

# Number of elements inspected when walking up from the headline.
HEADLINE_DEPTH = 6

# Elements scored when no better hint exists.
CONTAINER_TAGS = ["article", "main", "section", "div"]


def score_container(tag: Any, title_text: str) -> float:  # noqa: ANN401
    """Score how likely ``tag`` is to be the article body container.

    Args:
        tag: Candidate element.
        title_text: Lower-cased headline text, empty when unknown.

    Returns:
        Score where higher values mean a more likely article body.
    """

    paragraphs = tag.find_all("p")
    text_length = sum(len(_text(p)) for p in paragraphs)
    heading_count = len(tag.find_all(["h1", "h2", "h3"]))
    link_count = len(tag.find_all("a"))
    all_text = _text(tag).lower()

    score = text_length * 0.001 + len(paragraphs) * 5 + heading_count * 2

    # Reward containers that also hold the headline.
    if title_text and title_text in all_text:
        score += 20

    # Penalize consent notices, shop pages and account prompts.
    if contains_any(all_text, PENALTY_PHRASES):
        score -= 50

    # Penalize navigation and listing pages.
    if link_count > len(paragraphs) * 3:
        score -= 10

    return score


def _best_scoring(candidates: Any, title_text: str) -> Any:  # noqa: ANN401
    """Return the highest scoring candidate, the earliest one on ties."""

    best = None
    best_score = float("-inf")
    for candidate in candidates:
        score = score_container(candidate, title_text)
        if score > best_score:
            best, best_score = candidate, score

    return best


def _headline_chain(headline: Any) -> list[Any]:  # noqa: ANN401
    """Return the headline followed by its ancestors, nearest first."""

    chain: list[Any] = []
    node = headline
    while (
        node is not None
        and not isinstance(node, BeautifulSoup)
        and len(chain) < HEADLINE_DEPTH
    ):
        chain.append(node)
        node = node.parent

    return chain


def find_main_content(soup: BeautifulSoup) -> Any:  # noqa: ANN401
    """Return the element most likely to contain the article body.

    Explicit article markup wins outright. Otherwise the headline and its
    ancestors are scored, and when the page has no headline every generic
    container is. The document body is returned as a last resort.

    Args:
        soup: Sanitized document tree.

    Returns:
        The chosen element; never ``None``.
    """

    # Trust semantic and well-known CMS markup first.
    for selector in CONTENT_SELECTORS:
        match = soup.select_one(selector)
        if match is not None:
            logger.debug("Main content matched selector %s", selector)
            return match

    headline = soup.find("h1")
    title_text = _text(headline).lower() if headline else ""

    # Walk up from the headline towards the container holding the body.
    if headline is not None:
        best = _best_scoring(_headline_chain(headline), title_text)
        if best is not None:
            logger.debug("Main content found above headline: <%s>", best.name)
            return best

    # Score every generic container in the document.
    best = _best_scoring(soup.find_all(CONTAINER_TAGS), title_text)
    if best is not None:
        logger.debug("Main content found by scoring: <%s>", best.name)
        return best

    logger.debug("Main content defaults to the document body")
    return soup.body or soup
