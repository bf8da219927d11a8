"""Remove page furniture from a parsed HTML tree."""

from __future__ import annotations

import logging
from typing import Any

from .boilerplate import SANITIZE_SELECTORS

logger = logging.getLogger(__name__)


def remove_boilerplate(soup: Any) -> None:  # noqa: ANN401
    """Remove navigation, ads, consent banners and similar page furniture.

    Matching elements are removed from the tree together with their
    content. The tree is modified in place.

    Args:
        soup: Parsed document or any element of it.
    """

    removed = 0
    for selector in SANITIZE_SELECTORS:
        for tag in soup.select(selector):
            # Elements nested in an already removed match are skipped.
            if tag.decomposed:
                continue
            tag.decompose()
            removed += 1

    logger.debug("Removed %d boilerplate elements", removed)
