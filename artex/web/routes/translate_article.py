"""Translate an extracted article and its keywords."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter  # type: ignore[import-not-found]
from fastapi.responses import JSONResponse  # type: ignore[import-not-found]
from pydantic import BaseModel  # type: ignore[import-not-found]

from artex.serialize import article_to_dict
from artex.translate import translate_article, translate_keywords

from .. import utils

router = APIRouter()


class TranslateRequest(BaseModel):
    """Input payload for the translate endpoint.

    Attributes:
        article: Article as returned by the extract endpoint.
        target_language: Language name or code to translate into.
        keywords: Keywords translated along with the article.
    """

    article: dict[str, Any]
    target_language: str
    keywords: list[str] = []


@router.post("/translate-article")
def translate_endpoint(payload: TranslateRequest) -> JSONResponse:
    """Translate an article into the requested language.

    Keywords are translated twice: into the target language, and into the
    language the article was written in so they can be found in the
    original text as well.

    Args:
        payload: Article, target language and keywords.

    Returns:
        The translated article and both keyword translations.
    """

    article = utils.load_article(payload.article)
    translator = utils.get_translator()

    translated = translate_article(
        article, translator, payload.target_language
    )
    translated_keywords = translate_keywords(
        payload.keywords, translator, payload.target_language
    )

    # Keywords in the language of the original article.
    source_keywords: list[str] = []
    if payload.keywords:
        source_keywords = translate_keywords(
            payload.keywords,
            translator,
            translator.detect_language(article.title),
        )

    return JSONResponse(
        {
            "translated_article": article_to_dict(translated),
            "translated_keywords": translated_keywords,
            "source_language_keywords": source_keywords,
        }
    )
