"""Utility functions for reading text out of parsed HTML."""

from __future__ import annotations

import re
from typing import Any

from .boilerplate import SKIP_PHRASES, SKIP_TOKENS, contains_any

# Tags that make a ``div`` a container rather than a block of text.
BLOCK_CHILD_TAGS = (
    "div",
    "p",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "ul",
    "ol",
    "article",
    "section",
)

# Tags which, nested in a ``p``, mean the paragraph is mis-marked markup.
NESTED_BLOCK_TAGS = (
    "div",
    "section",
    "article",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
)

# Number of leading characters used to compare texts for duplicates.
DEDUP_PREFIX = 100


def _normalize_whitespace(text: str) -> str:
    """Collapse consecutive whitespace and trim the result."""

    return re.sub(r"\s+", " ", text).strip()


def _text(tag: Any) -> str:  # noqa: ANN401
    """Return the normalized visible text of ``tag``."""

    return _normalize_whitespace(tag.get_text())


def _dedup_key(text: str) -> str:
    """Return the key used to detect repeated content."""

    return text.strip().lower()[:DEDUP_PREFIX]


def _class_and_id(tag: Any) -> str:  # noqa: ANN401
    """Return the lower-cased class list and id of ``tag`` as one string."""

    classes = tag.get("class") or []
    if isinstance(classes, str):
        classes = [classes]
    return f"{' '.join(classes)} {tag.get('id') or ''}".lower()


def _is_leaf_div(tag: Any) -> bool:  # noqa: ANN401
    """Return whether a ``div`` has no block-level element children."""

    return not any(
        child.name in BLOCK_CHILD_TAGS
        for child in tag.find_all(True, recursive=False)
    )


def _has_nested_block(tag: Any) -> bool:  # noqa: ANN401
    """Return whether ``tag`` wraps any block-level descendant."""

    return tag.find(list(NESTED_BLOCK_TAGS)) is not None


def _should_skip(tag: Any, text: str) -> bool:  # noqa: ANN401
    """Return whether ``tag`` looks like page furniture.

    Args:
        tag: Candidate element.
        text: Normalized text of ``tag``.

    Returns:
        ``True`` when the element carries a boilerplate class or id, contains
        a boilerplate phrase or is dominated by links.
    """

    # Reject widgets recognized by their class or id.
    if contains_any(_class_and_id(tag), SKIP_TOKENS):
        return True

    # Reject navigation, legal and shop phrases.
    if contains_any(text.lower(), SKIP_PHRASES):
        return True

    # Reject link lists such as menus and tag clouds.
    link_count = len(tag.find_all("a"))
    if link_count > 8 and len(text) < 500:
        return True

    return len(text) < 100 and link_count > 3
