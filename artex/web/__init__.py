"""FastAPI application exposing article extraction and translation."""

from __future__ import annotations

from fastapi import FastAPI  # type: ignore[import-not-found]

from .routes import export, extract, fetch_article, translate_article

app = FastAPI(title="artex")

app.include_router(fetch_article.router)
app.include_router(extract.router)
app.include_router(translate_article.router)
app.include_router(export.router)
