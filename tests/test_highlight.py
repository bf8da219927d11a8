"""Tests for keyword parsing and highlighting."""

from __future__ import annotations

import pytest

from artex.highlight import (
    Segment,
    count_occurrences,
    highlight_keywords,
    parse_keywords,
    unique_keywords,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("climate, energy", ["climate", "energy"]),
        (" climate ,, energy , climate ", ["climate", "energy"]),
        ("", []),
        (None, []),
    ],
)
def test_parse_keywords(raw: str | None, expected: list[str]) -> None:
    """Keywords are trimmed, blanks dropped and repeats removed."""

    assert parse_keywords(raw) == expected


def test_unique_keywords_keeps_first_spelling() -> None:
    """Order of first appearance is preserved."""

    assert unique_keywords(["b", " a", "b ", "a", " "]) == ["b", "a"]


def test_highlight_is_case_insensitive() -> None:
    """Matches keep the spelling used in the text."""

    segments = highlight_keywords("Energy prices and energy use.", ["energy"])

    assert segments == [
        Segment("Energy", highlight=True),
        Segment(" prices and "),
        Segment("energy", highlight=True),
        Segment(" use."),
    ]


def test_highlight_prefers_longer_keywords() -> None:
    """A keyword containing another one is matched as a whole."""

    segments = highlight_keywords(
        "Solar energy is cheap energy.", ["energy", "solar energy"]
    )

    assert segments == [
        Segment("Solar energy", highlight=True),
        Segment(" is cheap "),
        Segment("energy", highlight=True),
        Segment("."),
    ]


def test_highlight_escapes_special_characters() -> None:
    """Keywords are matched literally."""

    segments = highlight_keywords("Use C++ or C.", ["c++"])

    assert segments == [
        Segment("Use "),
        Segment("C++", highlight=True),
        Segment(" or C."),
    ]


@pytest.mark.parametrize(
    "text, keywords",
    [("Nothing to mark.", []), ("Nothing to mark.", [" ", ""]), ("", ["x"])],
)
def test_highlight_without_terms_returns_text(
    text: str, keywords: list[str]
) -> None:
    """Without keywords or text a single plain segment is returned."""

    assert highlight_keywords(text, keywords) == [Segment(text)]


def test_highlight_segments_rebuild_text() -> None:
    """Segments concatenate back to the original text."""

    text = "energy at the start and at the end energy"
    segments = highlight_keywords(text, ["energy", "end"])

    assert "".join(s.text for s in segments) == text
    assert all(s.text for s in segments)
    assert [s.text for s in segments if s.highlight] == [
        "energy",
        "end",
        "energy",
    ]


def test_count_occurrences() -> None:
    """Occurrences are counted ignoring case."""

    assert count_occurrences("Rain, rain, RAIN.", "rain") == 3
    assert count_occurrences("Rain", "") == 0
