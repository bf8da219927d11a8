"""Tests for locating and scoring the article body container."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from artex.extractor.locator import find_main_content, score_container


def _soup(html: str) -> BeautifulSoup:
    """Parse ``html`` the way the extractor does."""

    return BeautifulSoup(html, "html.parser")


def test_score_counts_paragraphs_headings_and_text() -> None:
    """Paragraphs, headings and paragraph text all add to the score."""

    tag = _soup("<div><h2>Heading</h2><p>abcde</p><p>fghij</p></div>").div

    assert score_container(tag, "") == pytest.approx(12.01)


def test_score_rewards_headline() -> None:
    """Containers holding the headline get a bonus."""

    tag = _soup("<div><h2>Heading</h2><p>abcde</p><p>fghij</p></div>").div

    assert score_container(tag, "heading") == pytest.approx(32.01)
    assert score_container(tag, "missing") == pytest.approx(12.01)


@pytest.mark.parametrize(
    "phrase",
    ["Privacy Policy", "Política de privacidad", "Datenschutz", "Sign up"],
)
def test_score_penalizes_boilerplate_phrases(phrase: str) -> None:
    """Legal, shop and account phrases lower the score in any locale."""

    tag = _soup(f"<div><p>abcde</p><span>{phrase}</span></div>").div

    assert score_container(tag, "") == pytest.approx(5.005 - 50)


def test_score_penalizes_link_density() -> None:
    """More than three links per paragraph lowers the score."""

    links = "".join(f"<a href='/{i}'>x</a>" for i in range(4))
    tag = _soup(f"<div><p>abcde</p>{links}</div>").div

    assert score_container(tag, "") == pytest.approx(5.005 - 10)


def test_score_is_pure() -> None:
    """Scoring leaves the element untouched and is repeatable."""

    soup = _soup("<div><h2>Heading</h2><p>Some text</p></div>")
    before = str(soup)

    first = score_container(soup.div, "heading")
    second = score_container(soup.div, "heading")

    assert first == second
    assert str(soup) == before


@pytest.mark.parametrize(
    "html, expected",
    [
        ("<div><article id='a'><p>x</p></article><main></main></div>", "a"),
        ("<div><div role='main' id='a'></div><main></main></div>", "a"),
        ("<div><main id='a'></main><div class='content'></div></div>", "a"),
        ("<div><div class='entry-content' id='a'></div></div>", "a"),
        ("<div><section id='content'></section></div>", "content"),
    ],
)
def test_known_selectors_win(html: str, expected: str) -> None:
    """Semantic and CMS markup is used without scoring."""

    assert find_main_content(_soup(html)).get("id") == expected


def test_headline_ancestor_with_body_wins() -> None:
    """The nearest ancestor holding the body text is chosen."""

    soup = _soup(
        "<html><body><div id='wrap'>"
        "<div id='story'><h1>Title</h1><p>First line.</p>"
        "<p>Second line.</p></div>"
        "<div id='other'>Unrelated</div>"
        "</div></body></html>"
    )

    assert find_main_content(soup).get("id") == "story"


def test_scoring_without_headline_prefers_dense_container() -> None:
    """Every generic container is scored when the page has no headline."""

    soup = _soup(
        "<body><section id='thin'><p>One.</p></section>"
        "<section id='dense'><p>One.</p><p>Two.</p></section></body>"
    )

    # The body wraps both sections but is not a candidate itself.
    assert find_main_content(soup).get("id") == "dense"


def test_scoring_ties_keep_first_container() -> None:
    """Equal scores resolve to the earlier element in the document."""

    soup = _soup(
        "<body><section id='first'><p>Alpha text</p></section>"
        "<section id='second'><p>Bravo text</p></section></body>"
    )

    assert find_main_content(soup).get("id") == "first"


def test_body_returned_as_last_resort() -> None:
    """Pages without any container resolve to the body."""

    soup = _soup("<html><body><span>Just text</span></body></html>")

    assert find_main_content(soup) is soup.body


def test_document_returned_without_body() -> None:
    """An empty document resolves to the document itself."""

    soup = _soup("")

    assert find_main_content(soup) is soup
