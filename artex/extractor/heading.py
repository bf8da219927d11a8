"""Section heading found inside the article body."""

from __future__ import annotations

from typing import ClassVar

from attrs import define, field, validators


@define(slots=True, frozen=True)
class Heading:
    """Section heading found inside the article body.

    Level 1 is reserved for the article title, so body headings are
    always emitted with level 2, 3 or 4.

    Attributes:
        level: Heading depth.
        text: Visible heading text.
    """

    kind: ClassVar[str] = "heading"

    level: int = field(validator=validators.in_((1, 2, 3, 4)))
    text: str
