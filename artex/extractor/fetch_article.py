"""Download article HTML, using a local cache when possible."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

import requests  # type: ignore[import-untyped]

from artex.errors import FetchError

from .article_document import ArticleDocument
from .extract_article import extract_article

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
)
DEFAULT_TIMEOUT = 30


def _cache_file(url: str, cache_dir: Path) -> Path:
    """Return the cache location for ``url``."""

    digest = hashlib.sha256(url.encode("utf-8")).hexdigest()
    return cache_dir / f"{digest}.html"


def fetch_html(
    url: str,
    cache_dir: Path | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Download the HTML of ``url``.

    Args:
        url: Address of the article page.
        cache_dir: Directory used for caching downloaded HTML files. No
            caching happens when omitted.
        timeout: Request timeout in seconds.

    Returns:
        The page HTML.

    Throws:
        FetchError: If the URL is empty, the request fails or the server
            answers with an error status.
    """

    if not url:
        raise FetchError("URL is required")

    cache_file = None
    if cache_dir is not None:
        cache_dir.mkdir(parents=True, exist_ok=True)
        cache_file = _cache_file(url, cache_dir)
        if cache_file.exists():
            logger.debug("Using cached HTML for %s", url)
            return cache_file.read_text(encoding="utf-8")

    logger.debug("Fetching %s", url)
    try:
        response = requests.get(
            url, headers={"User-Agent": USER_AGENT}, timeout=timeout
        )
    except requests.RequestException as exc:
        raise FetchError(f"Failed to fetch URL: {exc}") from exc

    if not response.ok:
        raise FetchError(
            f"Failed to fetch URL: {response.status_code} {response.reason}",
            status_code=response.status_code,
        )

    html = response.text
    logger.debug("Fetched %d characters of HTML", len(html))

    if cache_file is not None:
        cache_file.write_text(html, encoding="utf-8")

    return html


def fetch_article(
    url: str, cache_dir: Path | None = None
) -> ArticleDocument:
    """Download the page at ``url`` and extract its article.

    Args:
        url: Address of the article page.
        cache_dir: Directory used for caching downloaded HTML files.

    Returns:
        The extracted article.
    """

    return extract_article(fetch_html(url, cache_dir))
