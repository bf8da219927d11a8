"""Utility helpers for web routes."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from fastapi import HTTPException  # type: ignore[import-not-found]

from artex.errors import ArticleFormatError, FetchError
from artex.extractor import ArticleDocument
from artex.serialize import article_from_dict
from artex.translate import GoogleTranslator, Translator

JSONDict = dict[str, Any]

# Directory caching downloaded HTML pages.
CACHE_DIR = Path(
    os.environ.get("ARTEX_CACHE_DIR", Path.home() / ".artex" / "cache")
)


def get_translator() -> Translator:
    """Return the translation service used by the routes."""

    return GoogleTranslator()


def fetch_error_response(exc: FetchError) -> HTTPException:
    """Map a download failure to an HTTP error.

    Args:
        exc: The failure raised while fetching the page.

    Returns:
        Exception carrying the upstream status, or 502 when the server
        could not be reached.
    """

    return HTTPException(
        status_code=exc.status_code or 502, detail=str(exc)
    )


def load_article(data: JSONDict) -> ArticleDocument:
    """Rebuild an article from a request body, answering 422 when invalid."""

    try:
        return article_from_dict(data)
    except ArticleFormatError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
