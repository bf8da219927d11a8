"""Ordered or unordered list of items."""

from __future__ import annotations

from typing import ClassVar

from attrs import define, field

from .types import ItemTuple


@define(slots=True, frozen=True)
class ItemList:
    """Ordered or unordered list of items.

    Attributes:
        items: Text of every list item in reading order.
    """

    kind: ClassVar[str] = "list"

    items: ItemTuple = field(converter=tuple)
