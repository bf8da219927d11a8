"""Tests for the Excel workbook export."""

from __future__ import annotations

from pathlib import Path

from openpyxl import load_workbook  # type: ignore[import-untyped]
from openpyxl.cell.rich_text import CellRichText  # type: ignore

from artex.extractor import (
    ArticleDocument,
    Heading,
    Image,
    ItemList,
    Paragraph,
)
from artex.xlsx import write_workbook

ARTICLE = ArticleDocument(
    title="Solar power report",
    content=[
        Heading(level=2, text="Solar growth"),
        Paragraph(text="Solar output doubled while wind stayed flat."),
        ItemList(items=["More solar farms", "Cheaper panels"]),
        Image(src="/chart.png", alt="Output chart"),
    ],
    author="Ann",
    publish_date="2024-05-01",
)


def _rows(ws) -> list[list]:  # type: ignore[no-untyped-def]
    """Return the sheet values as plain lists."""

    return [list(row) for row in ws.iter_rows(values_only=True)]


def test_workbook_sheets_and_tables(tmp_path: Path) -> None:
    """Every sheet holds one striped table."""

    path = tmp_path / "article.xlsx"
    write_workbook(article=ARTICLE, path=path, keywords=["solar"])

    wb = load_workbook(path)

    assert wb.sheetnames == ["Document", "Content", "Keywords"]
    for name in wb.sheetnames:
        table = wb[name].tables[name]
        assert table.tableStyleInfo.name == "TableStyleMedium9"
        assert table.tableStyleInfo.showRowStripes


def test_workbook_content(tmp_path: Path) -> None:
    """Metadata, elements and keyword counts are written as rows."""

    path = tmp_path / "article.xlsx"
    write_workbook(
        ARTICLE, path, [" solar ", "wind", "solar"], "https://e.com/a"
    )

    wb = load_workbook(path)

    assert _rows(wb["Document"]) == [
        ["title", "author", "publish_date", "source"],
        ["Solar power report", "Ann", "2024-05-01", "https://e.com/a"],
    ]
    assert _rows(wb["Content"]) == [
        ["position", "type", "level", "text", "src"],
        [1, "heading", 2, "Solar growth", None],
        [
            2,
            "paragraph",
            None,
            "Solar output doubled while wind stayed flat.",
            None,
        ],
        [3, "list", None, "• More solar farms\n• Cheaper panels", None],
        [4, "image", None, "Output chart", "/chart.png"],
    ]
    assert _rows(wb["Keywords"]) == [
        ["keyword", "occurrences"],
        ["solar", 4],
        ["wind", 1],
    ]


def test_workbook_emphasizes_keywords(tmp_path: Path) -> None:
    """Keyword occurrences are stored as bold rich text."""

    path = tmp_path / "article.xlsx"
    write_workbook(ARTICLE, path, ["solar"])

    wb = load_workbook(path, rich_text=True)
    cell = wb["Content"]["D3"].value

    assert isinstance(cell, CellRichText)
    assert str(cell) == "Solar output doubled while wind stayed flat."
    bold = [block.text for block in cell if not isinstance(block, str)]
    assert bold == ["Solar"]
    assert all(
        block.font.b for block in cell if not isinstance(block, str)
    )

    # Loading without rich text returns plain strings.
    plain = load_workbook(path)["Content"]
    assert plain["D5"].value == "Output chart"
    assert plain["D3"].value == str(cell)


def test_workbook_without_keywords(tmp_path: Path) -> None:
    """The keyword sheet is omitted when no keywords are given."""

    path = tmp_path / "article.xlsx"
    write_workbook(ARTICLE, path)

    wb = load_workbook(path)

    assert wb.sheetnames == ["Document", "Content"]


def test_workbook_wraps_long_text(tmp_path: Path) -> None:
    """Columns holding long text wrap and are wider."""

    article = ArticleDocument(
        title="Long",
        content=[Paragraph(text="A long paragraph of text. " * 5)],
    )
    path = tmp_path / "article.xlsx"
    write_workbook(article, path)

    ws = load_workbook(path)["Content"]

    assert ws.column_dimensions["D"].width == 100
    assert ws.column_dimensions["A"].width == 14
    assert ws["D2"].alignment.wrap_text
