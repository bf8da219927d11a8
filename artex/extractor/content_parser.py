"""Turn the elements of an HTML tree into article content."""

from __future__ import annotations

from typing import Any, Iterable

from attrs import define

from .heading import Heading
from .image import DEFAULT_ALT, Image
from .item_list import ItemList
from .paragraph import Paragraph
from .types import ContentElement, ContentList, SeenSet
from .utils import (
    _dedup_key,
    _has_nested_block,
    _is_leaf_div,
    _normalize_whitespace,
    _should_skip,
    _text,
)

# Length limits for emitted text, upper bounds are exclusive.
MIN_PARAGRAPH_LENGTH = 5
MAX_TEXT_LENGTH = 5000
MAX_HEADING_LENGTH = 300
MIN_ITEM_LENGTH = 6
MAX_ITEM_LENGTH = 1000
MAX_LIST_ITEMS = 100

# Output level of each heading tag; level 1 belongs to the title.
HEADING_LEVELS = {"h1": 2, "h2": 2, "h3": 3, "h4": 4, "h5": 4, "h6": 4}

# Image sources containing these fragments are page decoration.
DECORATIVE_IMAGE_TOKENS = ("icon", "logo", "avatar")

CONTENT_TAGS = [*HEADING_LEVELS, "p", "div", "ul", "ol", "img"]
FALLBACK_TAGS = [*HEADING_LEVELS, "p", "div", "ul", "ol"]


@define(slots=True, frozen=True)
class ParseRules:
    """Thresholds that differ between the primary and the fallback pass.

    Attributes:
        min_div_length: Shortest ``div`` text accepted as a paragraph.
        reject_wrapping_paragraphs: Drop ``p`` elements that wrap blocks.
        drop_headline_h1: Drop ``h1`` elements that repeat the title.
    """

    min_div_length: int
    reject_wrapping_paragraphs: bool
    drop_headline_h1: bool


PRIMARY_RULES = ParseRules(
    min_div_length=20,
    reject_wrapping_paragraphs=True,
    drop_headline_h1=True,
)
FALLBACK_RULES = ParseRules(
    min_div_length=MIN_PARAGRAPH_LENGTH,
    reject_wrapping_paragraphs=False,
    drop_headline_h1=False,
)


def _list_items(list_tag: Any) -> list[str]:  # noqa: ANN401
    """Return the text of the items belonging directly to ``list_tag``.

    Text of lists nested inside an item is removed from that item, since
    nested lists are emitted on their own.
    """

    items: list[str] = []
    for item in list_tag.find_all("li"):
        if item.find_parent(["ul", "ol"]) is not list_tag:
            continue

        text = _text(item)
        for nested in item.find_all(["ul", "ol"]):
            if nested.find_parent("li") is item:
                text = text.replace(_text(nested), "", 1)

        items.append(_normalize_whitespace(text))

    return items


def _item_list(
    list_tag: Any, seen: SeenSet  # noqa: ANN401
) -> ItemList | None:
    """Build a list element, ``None`` when no usable items remain."""

    items = [
        item
        for item in _list_items(list_tag)
        if MIN_ITEM_LENGTH <= len(item) < MAX_ITEM_LENGTH
    ]
    if not 0 < len(items) < MAX_LIST_ITEMS:
        return None

    # Lists are keyed on their leading items.
    key = _dedup_key("|".join(items[:3]))
    if key in seen:
        return None

    seen.add(key)
    return ItemList(items=items)


def _image(tag: Any, seen: SeenSet) -> Image | None:  # noqa: ANN401
    """Build an image element unless the source is decoration."""

    src = str(tag.get("src") or "").strip()
    if not src:
        return None

    if any(token in src for token in DECORATIVE_IMAGE_TOKENS):
        return None

    key = f"image:{src}"
    if key in seen:
        return None

    seen.add(key)
    alt = _normalize_whitespace(str(tag.get("alt") or "")) or DEFAULT_ALT
    return Image(src=src, alt=alt)


def _heading(
    name: str, text: str, title: str, rules: ParseRules
) -> Heading | None:
    """Build a heading element from a heading tag's text."""

    if len(text) > MAX_HEADING_LENGTH:
        return None

    # The page headline is already the article title.
    if name == "h1" and rules.drop_headline_h1 and title in text.lower():
        return None

    return Heading(level=HEADING_LEVELS[name], text=text)


def _paragraph(
    tag: Any, text: str, rules: ParseRules  # noqa: ANN401
) -> Paragraph | None:
    """Build a paragraph element from a ``p`` or leaf ``div``."""

    if tag.name == "div":
        min_length = rules.min_div_length
    else:
        min_length = MIN_PARAGRAPH_LENGTH

    if not min_length <= len(text) < MAX_TEXT_LENGTH:
        return None

    if (
        tag.name == "p"
        and rules.reject_wrapping_paragraphs
        and _has_nested_block(tag)
    ):
        return None

    return Paragraph(text=text)


def _classify(
    tag: Any,  # noqa: ANN401
    title: str,
    seen: SeenSet,
    rules: ParseRules,
) -> ContentElement | None:
    """Convert a single element into article content.

    Args:
        tag: Element to classify.
        title: Lower-cased article title.
        seen: Keys of content emitted so far; updated in place.
        rules: Thresholds of the current pass.

    Returns:
        The content element, or ``None`` when the element is rejected.
    """

    text = _text(tag)
    if _should_skip(tag, text):
        return None

    if tag.name == "img":
        return _image(tag, seen)

    # Container divs are covered by their children.
    if tag.name == "div" and not _is_leaf_div(tag):
        return None

    if not text:
        return None

    key = _dedup_key(text)
    if key in seen or text.lower() == title:
        return None

    if tag.name in ("ul", "ol"):
        return _item_list(tag, seen)

    element: ContentElement | None
    if tag.name in HEADING_LEVELS:
        element = _heading(tag.name, text, title, rules)
    else:
        element = _paragraph(tag, text, rules)

    if element is not None:
        seen.add(key)

    return element


def _walk(
    tags: Iterable[Any], title: str, rules: ParseRules
) -> ContentList:
    """Classify ``tags`` in order, dropping rejects and repeats."""

    normalized_title = title.strip().lower()
    seen: SeenSet = {_dedup_key(title)}

    parsed: ContentList = []
    for tag in tags:
        element = _classify(tag, normalized_title, seen, rules)
        if element is not None:
            parsed.append(element)

    return parsed


def parse_content(container: Any, title: str) -> ContentList:  # noqa: ANN401
    """Parse the article body found inside ``container``.

    Args:
        container: Element located as the article body.
        title: Article title; content repeating it is dropped.

    Returns:
        Content elements in document order.
    """

    return _walk(container.find_all(CONTENT_TAGS), title, PRIMARY_RULES)


def fallback_content(soup: Any, title: str) -> ContentList:  # noqa: ANN401
    """Parse headings, paragraphs and lists from the whole document.

    Used when the located container yields too little content. Short
    ``div`` texts are accepted and images are ignored.

    Args:
        soup: Sanitized document tree.
        title: Article title; content repeating it is dropped.

    Returns:
        Content elements in document order.
    """

    return _walk(soup.find_all(FALLBACK_TAGS), title, FALLBACK_RULES)
