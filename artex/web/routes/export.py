"""Export an article to an Excel workbook."""

from __future__ import annotations

import os
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

from fastapi import (  # type: ignore[import-not-found]
    APIRouter,
    BackgroundTasks,
)
from fastapi.responses import FileResponse  # type: ignore[import-not-found]
from pydantic import BaseModel  # type: ignore[import-not-found]

from artex.serialize import file_stem
from artex.xlsx import write_workbook

from .. import utils

router = APIRouter()


class ExportRequest(BaseModel):
    """Input payload for the export endpoint."""

    article: dict[str, Any]
    keywords: list[str] = []
    source: str | None = None


@router.post("/export")
def export_endpoint(
    payload: ExportRequest, background_tasks: BackgroundTasks
) -> FileResponse:
    """Return the article as an xlsx download with keywords emphasized.

    Args:
        payload: Article, keywords and source address.
        background_tasks: Used to delete the temporary file afterwards.

    Returns:
        The workbook as a file download.
    """

    article = utils.load_article(payload.article)

    # Prepare XLSX output by writing to a temporary file.
    tmp = NamedTemporaryFile(suffix=".xlsx", delete=False)
    tmp.close()
    write_workbook(
        article, Path(tmp.name), payload.keywords, source=payload.source
    )

    # Schedule file deletion after the response is sent.
    background_tasks.add_task(os.unlink, tmp.name)

    return FileResponse(
        tmp.name, filename=f"{file_stem(article.title)}.xlsx"
    )
