"""Common type aliases for extracted article structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .heading import Heading  # noqa: F401
    from .image import Image  # noqa: F401
    from .item_list import ItemList  # noqa: F401
    from .paragraph import Paragraph  # noqa: F401


ContentElement = Union["Heading", "Paragraph", "ItemList", "Image"]
ContentList = list[ContentElement]
ItemTuple = tuple[str, ...]
SeenSet = set[str]
