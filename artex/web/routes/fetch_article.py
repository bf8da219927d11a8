"""Download the raw HTML of an article page."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException  # type: ignore[import-not-found]
from fastapi.responses import JSONResponse  # type: ignore[import-not-found]
from pydantic import BaseModel  # type: ignore[import-not-found]

from artex import extractor
from artex.errors import FetchError

from .. import utils

router = APIRouter()


class FetchRequest(BaseModel):
    """Input payload for the fetch endpoint."""

    url: str = ""


@router.post("/fetch-article")
def fetch_article_html(payload: FetchRequest) -> JSONResponse:
    """Return the HTML of the page at ``payload.url``.

    Args:
        payload: Address of the page to download.

    Returns:
        Mapping with the ``html`` of the page.
    """

    if not payload.url:
        raise HTTPException(status_code=400, detail="URL is required")

    try:
        html = extractor.fetch_html(payload.url, utils.CACHE_DIR)
    except FetchError as exc:
        raise utils.fetch_error_response(exc) from exc

    return JSONResponse({"html": html})
