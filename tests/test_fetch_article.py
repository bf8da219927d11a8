from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import requests  # type: ignore[import-untyped]

from artex import extractor
from artex.errors import ArtexError, FetchError

HTML = (
    "<html><head><title>t</title></head><body><article>"
    "<h1>Cached Story</h1><p>Body of the cached story.</p>"
    "</article></body></html>"
)


def test_fetch_html_uses_cache(tmp_path: Path) -> None:
    """Fetches the page from network only once and caches the HTML."""

    url = "https://example.com/story"
    response = Mock(text=HTML, ok=True)

    with patch("requests.get", return_value=response) as mock_get:
        result = extractor.fetch_html(url, cache_dir=tmp_path)
        assert mock_get.called

    assert result == HTML
    assert len(list(tmp_path.glob("*.html"))) == 1

    with patch("requests.get", return_value=response) as mock_get:
        assert extractor.fetch_html(url, cache_dir=tmp_path) == HTML
        mock_get.assert_not_called()


def test_fetch_html_sends_browser_user_agent() -> None:
    """Requests identify as a desktop browser."""

    response = Mock(text=HTML, ok=True)

    with patch("requests.get", return_value=response) as mock_get:
        extractor.fetch_html("https://example.com/story")

    headers = mock_get.call_args.kwargs["headers"]
    assert headers["User-Agent"].startswith("Mozilla/5.0")
    assert mock_get.call_args.kwargs["timeout"] == 30


def test_fetch_html_without_cache_dir_always_downloads() -> None:
    """No cache is used when no directory is given."""

    response = Mock(text=HTML, ok=True)

    with patch("requests.get", return_value=response) as mock_get:
        extractor.fetch_html("https://example.com/story")
        extractor.fetch_html("https://example.com/story")

    assert mock_get.call_count == 2


def test_fetch_html_error_status() -> None:
    """Error responses raise with the status code."""

    response = Mock(text="", ok=False, status_code=404, reason="Not Found")

    with patch("requests.get", return_value=response):
        with pytest.raises(FetchError) as info:
            extractor.fetch_html("https://example.com/missing")

    assert info.value.status_code == 404
    assert "404 Not Found" in str(info.value)


def test_fetch_html_network_error(tmp_path: Path) -> None:
    """Connection problems raise without a status code or cache entry."""

    with patch(
        "requests.get", side_effect=requests.ConnectionError("refused")
    ):
        with pytest.raises(ArtexError) as info:
            extractor.fetch_html("https://example.com/", cache_dir=tmp_path)

    assert isinstance(info.value, FetchError)
    assert info.value.status_code is None
    assert list(tmp_path.iterdir()) == []


def test_fetch_html_requires_url() -> None:
    """An empty address is rejected before any request."""

    with patch("requests.get") as mock_get:
        with pytest.raises(FetchError, match="URL is required"):
            extractor.fetch_html("")

    mock_get.assert_not_called()


def test_fetch_article_extracts_page(tmp_path: Path) -> None:
    """Fetching an article downloads and extracts it."""

    response = Mock(text=HTML, ok=True)

    with patch("requests.get", return_value=response):
        article = extractor.fetch_article(
            "https://example.com/story", tmp_path
        )

    assert article.title == "Cached Story"
    assert article.content == [
        extractor.Paragraph(text="Body of the cached story.")
    ]
