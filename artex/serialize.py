"""Convert articles to and from plain data, JSON and YAML."""

from __future__ import annotations

try:
    import orjson  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]

import json
import re
from typing import Any

import yaml  # type: ignore[import-untyped]
from attrs import asdict

from artex.errors import ArticleFormatError
from artex.extractor import (
    ArticleDocument,
    Heading,
    Image,
    ItemList,
    Paragraph,
)
from artex.extractor.types import ContentElement

JSONDict = dict[str, Any]

# Element classes keyed by their serialized type tag.
ELEMENT_TYPES: dict[str, type] = {
    cls.kind: cls for cls in (Heading, Paragraph, ItemList, Image)
}


def element_to_dict(element: ContentElement) -> JSONDict:
    """Return ``element`` as a dictionary tagged with its type."""

    data = {"type": element.kind, **asdict(element)}

    # List items are stored as a tuple; plain data uses lists.
    if isinstance(element, ItemList):
        data["items"] = list(element.items)

    return data


def element_from_dict(data: JSONDict) -> ContentElement:
    """Rebuild a content element from its dictionary form.

    Args:
        data: Mapping produced by :func:`element_to_dict`.

    Returns:
        The content element.

    Throws:
        ArticleFormatError: If the type tag or the fields are invalid.
    """

    fields = dict(data)
    kind = fields.pop("type", None)
    cls = ELEMENT_TYPES.get(str(kind))
    if cls is None:
        raise ArticleFormatError(f"Unknown content element type: {kind!r}")

    try:
        return cls(**fields)
    except (TypeError, ValueError) as exc:
        raise ArticleFormatError(f"Invalid {kind} element: {exc}") from exc


def article_to_dict(article: ArticleDocument) -> JSONDict:
    """Return ``article`` as plain data ready for JSON or YAML."""

    return {
        "title": article.title,
        "author": article.author,
        "publish_date": article.publish_date,
        "content": [element_to_dict(e) for e in article.content],
    }


def article_from_dict(data: JSONDict) -> ArticleDocument:
    """Rebuild an article from its dictionary form.

    Args:
        data: Mapping produced by :func:`article_to_dict`.

    Returns:
        The article.

    Throws:
        ArticleFormatError: If the title is missing or an element is
            invalid.
    """

    title = data.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ArticleFormatError("Article title is required")

    content = data.get("content") or []
    if not isinstance(content, list):
        raise ArticleFormatError("Article content must be a list")

    return ArticleDocument(
        title=title,
        content=[element_from_dict(e) for e in content],
        author=data.get("author"),
        publish_date=data.get("publish_date"),
    )


def json_dumps(data: object) -> str:
    """Serialize data to a JSON string.

    Args:
        data: Data structure to serialize.

    Returns:
        JSON representation of ``data``.
    """

    if orjson is not None:
        return orjson.dumps(data).decode()
    return json.dumps(data, ensure_ascii=False)


def dumps_article(article: ArticleDocument, fmt: str = "json") -> str:
    """Render ``article`` as JSON or YAML text.

    Args:
        article: Article to render.
        fmt: Either ``"json"`` or ``"yaml"``.

    Returns:
        The serialized article.
    """

    data = article_to_dict(article)
    if fmt == "json":
        return json_dumps(data)
    if fmt == "yaml":
        return yaml.safe_dump(data, allow_unicode=True, sort_keys=False)

    raise ValueError(f"Unsupported format: {fmt}")


def file_stem(title: str) -> str:
    """Return a file name friendly version of an article title."""

    stem = re.sub(r"[^\w]+", "-", title.lower()).strip("-")
    return stem[:80] or "article"
