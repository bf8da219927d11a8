"""Tests for title, author and date extraction."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from artex.extractor.metadata import (
    UNTITLED,
    extract_author,
    extract_publish_date,
    extract_title,
)


def _soup(html: str) -> BeautifulSoup:
    """Parse ``html`` the way the extractor does."""

    return BeautifulSoup(html, "html.parser")


@pytest.mark.parametrize(
    "html, expected",
    [
        (
            "<title>Tab</title><div class='post-title'>Post</div><h1>H</h1>",
            "H",
        ),
        ("<title>Tab</title><div class='post-title'>Post</div>", "Post"),
        ("<head><title>Tab</title></head><body></body>", "Tab"),
        ("<h1>   </h1><title>Tab</title>", "Tab"),
        ("<h1>  Spaced\n  title </h1>", "Spaced title"),
        ("<p>No title here</p>", UNTITLED),
        ("", UNTITLED),
    ],
)
def test_extract_title(html: str, expected: str) -> None:
    """The first selector with text names the article."""

    assert extract_title(_soup(html)) == expected


@pytest.mark.parametrize(
    "html, expected",
    [
        ("<a rel='author'>Ann</a><span class='author'>Bob</span>", "Ann"),
        ("<span class='author'>Bob</span><p class='byline'>Cy</p>", "Bob"),
        ("<p class='byline'>By Cy</p>", "By Cy"),
        ("<div class='post-author-name'>Dee</div>", "Dee"),
        ("<span itemprop='author'>Eve</span>", "Eve"),
        ("<p>Nobody</p>", None),
    ],
)
def test_extract_author(html: str, expected: str | None) -> None:
    """Author selectors are tried in order."""

    assert extract_author(_soup(html)) == expected


@pytest.mark.parametrize(
    "html, expected",
    [
        ("<time datetime='2024-05-01'>May 1st</time>", "2024-05-01"),
        ("<time>May 1st</time><span class='date'>Today</span>", "Today"),
        ("<span itemprop='datePublished'>2 May</span>", "2 May"),
        ("<span class='publish-date'>3 May 2024</span>", "3 May 2024"),
        ("<div class='entry-date'>4 May</div>", "4 May"),
        ("<p>Undated</p>", None),
    ],
)
def test_extract_publish_date(html: str, expected: str | None) -> None:
    """Machine readable dates win over visible labels."""

    assert extract_publish_date(_soup(html)) == expected
