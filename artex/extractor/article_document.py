"""Structured article extracted from an HTML page."""

from __future__ import annotations

from attrs import define, field

from .types import ContentList


@define(slots=True, frozen=True)
class ArticleDocument:
    """Structured article extracted from an HTML page.

    Attributes:
        title: Article headline, never empty.
        content: Body elements in reading order, never empty.
        author: Author name if the page exposes one.
        publish_date: Raw publication date, either an ISO ``datetime``
            attribute or free text.
    """

    title: str
    content: ContentList = field(factory=list, repr=False)
    author: str | None = None
    publish_date: str | None = None
