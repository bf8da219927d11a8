"""Represents a paragraph of article text."""

from __future__ import annotations

from typing import ClassVar

from attrs import define


@define(slots=True, frozen=True)
class Paragraph:
    """Represents a paragraph of article text.

    Attributes:
        text: Whitespace-normalized paragraph text.
    """

    kind: ClassVar[str] = "paragraph"

    text: str
