"""Locate keyword occurrences in article text."""

from __future__ import annotations

import re
from typing import Iterable

from attrs import define


@define(slots=True, frozen=True)
class Segment:
    """Run of text that either is or is not a keyword occurrence.

    Attributes:
        text: Text of the run.
        highlight: Whether the run matches a keyword.
    """

    text: str
    highlight: bool = False


def parse_keywords(raw: str | None) -> list[str]:
    """Split a comma separated keyword string.

    Args:
        raw: Keywords such as ``"climate, energy"``.

    Returns:
        Trimmed, non-empty keywords without repeats, in input order.
    """

    return unique_keywords((raw or "").split(","))


def unique_keywords(keywords: Iterable[str]) -> list[str]:
    """Return trimmed, non-empty ``keywords`` without repeats."""

    result: list[str] = []
    for keyword in keywords:
        keyword = keyword.strip()
        if keyword and keyword not in result:
            result.append(keyword)
    return result


def highlight_keywords(text: str, keywords: Iterable[str]) -> list[Segment]:
    """Split ``text`` into plain and keyword segments.

    Matching ignores case. Longer keywords are tried first so that a
    keyword containing another one is matched as a whole.

    Args:
        text: Text to split.
        keywords: Keywords to look for.

    Returns:
        Segments that concatenate back to ``text``.
    """

    terms = sorted(unique_keywords(keywords), key=len, reverse=True)
    if not terms or not text:
        return [Segment(text)]

    pattern = re.compile(
        "(" + "|".join(re.escape(term) for term in terms) + ")",
        re.IGNORECASE,
    )

    # Odd positions of the split result hold the captured matches.
    return [
        Segment(part, highlight=index % 2 == 1)
        for index, part in enumerate(pattern.split(text))
        if part
    ]


def count_occurrences(text: str, keyword: str) -> int:
    """Return how often ``keyword`` occurs in ``text``, ignoring case."""

    if not keyword:
        return 0
    return len(re.findall(re.escape(keyword), text, re.IGNORECASE))
