"""Extract a structured article from HTML or a URL."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException  # type: ignore[import-not-found]
from fastapi.responses import JSONResponse  # type: ignore[import-not-found]
from pydantic import BaseModel  # type: ignore[import-not-found]

from artex import extractor
from artex.errors import FetchError
from artex.serialize import article_to_dict

from .. import utils

router = APIRouter()


class ExtractRequest(BaseModel):
    """Input payload for the extract endpoint.

    Attributes:
        html: Raw HTML of the page.
        url: Address of the page, downloaded when ``html`` is absent.
    """

    html: str | None = None
    url: str | None = None


@router.post("/extract")
def extract_endpoint(payload: ExtractRequest) -> JSONResponse:
    """Extract the article of a page.

    Args:
        payload: Either the HTML or the address of the page.

    Returns:
        The extracted article.
    """

    if (payload.html is None) == (payload.url is None):
        raise HTTPException(
            status_code=400, detail="Provide exactly one of html or url"
        )

    if payload.html is not None:
        article = extractor.extract_article(payload.html)
    else:
        try:
            article = extractor.fetch_article(
                payload.url or "", utils.CACHE_DIR
            )
        except FetchError as exc:
            raise utils.fetch_error_response(exc) from exc

    return JSONResponse(article_to_dict(article))
