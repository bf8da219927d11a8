"""Utilities for exporting articles to Excel workbooks."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List

from openpyxl import Workbook  # type: ignore[import-untyped]
from openpyxl.cell.rich_text import (  # type: ignore[import-untyped]
    CellRichText,
    TextBlock,
)
from openpyxl.cell.text import InlineFont  # type: ignore[import-untyped]
from openpyxl.styles import Alignment  # type: ignore[import-untyped]
from openpyxl.utils import get_column_letter  # type: ignore[import-untyped]
from openpyxl.worksheet.table import (  # type: ignore[import-untyped]
    Table,
    TableStyleInfo,
)

from artex.extractor import ArticleDocument, Heading, Image, ItemList
from artex.highlight import (
    count_occurrences,
    highlight_keywords,
    unique_keywords,
)

Row = Dict[str, Any]
Sheets = Dict[str, List[Row]]

# Font applied to keyword occurrences.
KEYWORD_FONT = InlineFont(b=True, color="C00000")


def _element_text(element: Any) -> str:  # noqa: ANN401
    """Return the text shown for a content element."""

    if isinstance(element, ItemList):
        return "\n".join(f"• {item}" for item in element.items)
    if isinstance(element, Image):
        return element.alt
    return element.text


def _flatten(
    article: ArticleDocument, keywords: List[str], source: str | None
) -> Sheets:
    """Flatten the article into tabular sheet data.

    Args:
        article: Article to export.
        keywords: Keywords to count.
        source: Address the article was read from, if known.

    Returns:
        Mapping of sheet names to row dictionaries.
    """

    sheets: Sheets = {"Document": [], "Content": [], "Keywords": []}

    sheets["Document"].append(
        {
            "title": article.title,
            "author": article.author,
            "publish_date": article.publish_date,
            "source": source,
        }
    )

    for position, element in enumerate(article.content, start=1):
        is_heading = isinstance(element, Heading)
        sheets["Content"].append(
            {
                "position": position,
                "type": element.kind,
                "level": element.level if is_heading else None,
                "text": _element_text(element),
                "src": element.src if isinstance(element, Image) else None,
            }
        )

    # Count keyword occurrences over the title and the whole body.
    full_text = "\n".join(
        [article.title] + [row["text"] for row in sheets["Content"]]
    )
    for keyword in keywords:
        sheets["Keywords"].append(
            {
                "keyword": keyword,
                "occurrences": count_occurrences(full_text, keyword),
            }
        )

    # Drop entries for which no data was recorded.
    return {name: rows for name, rows in sheets.items() if rows}


def _emphasize(text: str, keywords: List[str]) -> Any:  # noqa: ANN401
    """Return ``text`` as rich text with keywords in bold."""

    segments = highlight_keywords(text, keywords)
    if not any(segment.highlight for segment in segments):
        return text

    return CellRichText(
        *(
            TextBlock(KEYWORD_FONT, s.text) if s.highlight else s.text
            for s in segments
        )
    )


def write_workbook(
    article: ArticleDocument,
    path: Path,
    keywords: Iterable[str] = (),
    source: str | None = None,
) -> None:
    """Write an article into an Excel workbook.

    Args:
        article: Article to export.
        path: Destination file path for the workbook.
        keywords: Keywords emphasized in the content text and counted in a
            dedicated sheet.
        source: Address the article was read from, if known.
    """

    keyword_list = unique_keywords(keywords)
    data = _flatten(article, keyword_list, source)

    # Create a workbook and remove the default sheet created by openpyxl.
    workbook = Workbook()
    default_sheet = workbook.active
    if default_sheet is not None:
        workbook.remove(default_sheet)

    for sheet_name, rows in data.items():
        ws = workbook.create_sheet(title=sheet_name)

        # Write header row based on dictionary keys.
        headers = list(rows[0].keys())
        ws.append(headers)

        # Track which column indexes require wrapped text and custom widths.
        long_text_columns: set[int] = set()

        for row in rows:
            values: List[Any] = []
            for idx, header in enumerate(headers):
                cell_value = row.get(header)

                # Mark columns containing long text for wrapping and custom
                # width.
                if isinstance(cell_value, str) and len(cell_value) > 50:
                    long_text_columns.add(idx)

                if sheet_name == "Content" and header == "text":
                    cell_value = _emphasize(cell_value, keyword_list)

                values.append(cell_value)

            ws.append(values)

        # Apply wrap text alignment to the marked columns.
        for col_idx in long_text_columns:
            for col_cells in ws.iter_cols(
                min_col=col_idx + 1,
                max_col=col_idx + 1,
                min_row=1,
                max_row=ws.max_row,
            ):
                for cell in col_cells:
                    cell.alignment = Alignment(wrapText=True)

        # Set column widths based on the contained data type.
        for idx in range(len(headers)):
            col_letter = get_column_letter(idx + 1)
            if idx in long_text_columns:
                ws.column_dimensions[col_letter].width = 100
            else:
                ws.column_dimensions[col_letter].width = 14

        # Determine table range covering the header and all rows.
        end_column = get_column_letter(len(headers))
        end_row = len(rows) + 1
        table = Table(displayName=sheet_name, ref=f"A1:{end_column}{end_row}")

        # Apply a simple table style with row stripes for readability.
        style = TableStyleInfo(name="TableStyleMedium9", showRowStripes=True)
        table.tableStyleInfo = style

        ws.add_table(table)

    workbook.save(path)
