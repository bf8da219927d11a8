"""Image embedded in the article body."""

from __future__ import annotations

from typing import ClassVar

from attrs import define

DEFAULT_ALT = "Image"


@define(slots=True, frozen=True)
class Image:
    """Image embedded in the article body.

    Attributes:
        src: Image source as written in the HTML.
        alt: Alternative text, ``"Image"`` when the page provides none.
    """

    kind: ClassVar[str] = "image"

    src: str
    alt: str = DEFAULT_ALT
