"""Translate extracted articles element by element."""

from __future__ import annotations

import logging
import re
import time
from typing import Any, Iterable, Protocol

import requests  # type: ignore[import-untyped]
from attrs import evolve

from artex.extractor import ArticleDocument, Image, ItemList
from artex.extractor.types import ContentElement
from artex.highlight import unique_keywords

logger = logging.getLogger(__name__)

GOOGLE_TRANSLATE_URL = "https://translate.googleapis.com/translate_a/single"

# Longest text sent to the translation service in one request.
MAX_CHUNK_LENGTH = 500

# Codes such as "de", "zh-CN" or "auto".
LANGUAGE_CODE_PATTERN = re.compile(
    r"^(?:auto|[a-z]{2,3}(?:-[A-Za-z]{2,4})?)$"
)

# Display names of the supported target languages.
LANGUAGE_CODES = {
    "English": "en",
    "English (American)": "en",
    "English (British)": "en",
    "Spanish": "es",
    "French": "fr",
    "German": "de",
    "Italian": "it",
    "Portuguese": "pt",
    "Portuguese (Brazilian)": "pt",
    "Russian": "ru",
    "Chinese (Simplified)": "zh-CN",
    "Chinese (Traditional)": "zh-TW",
    "Japanese": "ja",
    "Korean": "ko",
    "Arabic": "ar",
    "Hindi": "hi",
    "Turkish": "tr",
    "Dutch": "nl",
    "Polish": "pl",
}


class Translator(Protocol):
    """Service able to translate a span of text."""

    def translate_span(
        self, text: str, source_lang: str, target_lang: str
    ) -> str:
        """Return ``text`` translated into ``target_lang``."""

    def detect_language(self, text: str) -> str:
        """Return the language code of ``text``."""


def language_code(language: str) -> str:
    """Return the service code for a language name or code.

    Args:
        language: Display name such as ``"German"`` or a code such as
            ``"de"``.

    Returns:
        The language code, ``"en"`` when the language is neither a known
        name nor shaped like a code.
    """

    if language in LANGUAGE_CODES:
        return LANGUAGE_CODES[language]
    if LANGUAGE_CODE_PATTERN.match(language):
        return language
    return "en"


def split_into_chunks(
    text: str, max_length: int = MAX_CHUNK_LENGTH
) -> list[str]:
    """Split ``text`` into chunks no longer than ``max_length``.

    Chunks end at sentence boundaries; sentences that are too long on their
    own are split between words.

    Args:
        text: Text to split.
        max_length: Longest allowed chunk.

    Returns:
        Chunks in their original order.
    """

    if len(text) <= max_length:
        return [text]

    sentences = re.findall(r"[^.!?]+[.!?]+|[^.!?]+$", text) or [text]
    chunks: list[str] = []
    current = ""

    for sentence in sentences:
        if len(current + sentence) <= max_length:
            current += sentence
            continue

        if current.strip():
            chunks.append(current.strip())
        current = ""

        if len(sentence) <= max_length:
            current = sentence
            continue

        # Break an over-long sentence between words.
        for word in sentence.split():
            candidate = f"{current} {word}" if current else word
            if len(candidate) <= max_length:
                current = candidate
            else:
                if current:
                    chunks.append(current)
                current = word

    if current.strip():
        chunks.append(current.strip())

    return chunks


class GoogleTranslator:
    """Client for the public Google Translate endpoint.

    Attributes:
        timeout: Request timeout in seconds.
        delay: Pause in seconds between consecutive requests.
    """

    def __init__(self, timeout: float = 30, delay: float = 0.0) -> None:
        self.timeout = timeout
        self.delay = delay

    def _request(
        self, text: str, source_lang: str, target_lang: str
    ) -> Any:  # noqa: ANN401
        """Send ``text`` to the service and return the decoded payload."""

        response = requests.get(
            GOOGLE_TRANSLATE_URL,
            params={
                "client": "gtx",
                "sl": source_lang,
                "tl": target_lang,
                "dt": "t",
                "q": text,
            },
            timeout=self.timeout,
        )
        response.raise_for_status()

        if self.delay:
            time.sleep(self.delay)

        return response.json()

    def _translate_chunk(
        self, chunk: str, source_lang: str, target_lang: str
    ) -> str:
        """Translate one chunk, keeping the original text on failure."""

        try:
            data = self._request(chunk, source_lang, target_lang)
        except (requests.RequestException, ValueError) as exc:
            logger.error("Translation request failed: %s", exc)
            return chunk

        if not (isinstance(data, list) and data and isinstance(data[0], list)):
            logger.warning("Unexpected translation response: %r", data)
            return chunk

        translated = "".join(
            part[0] for part in data[0] if isinstance(part, list) and part[0]
        )
        return translated or chunk

    def translate_span(
        self, text: str, source_lang: str, target_lang: str
    ) -> str:
        """Translate ``text`` chunk by chunk.

        Args:
            text: Text to translate.
            source_lang: Source language code or ``"auto"``.
            target_lang: Target language code.

        Returns:
            The translated text; chunks that could not be translated are
            returned unchanged.
        """

        if not text or not text.strip():
            return text

        chunks = split_into_chunks(text)
        logger.debug(
            "Translating %d chunks from %s to %s",
            len(chunks),
            source_lang,
            target_lang,
        )
        return " ".join(
            self._translate_chunk(chunk, source_lang, target_lang)
            for chunk in chunks
        )

    def detect_language(self, text: str) -> str:
        """Return the language code of ``text``, ``"en"`` when unknown."""

        if not text or not text.strip():
            return "en"

        try:
            data = self._request(text[:100], "auto", "en")
        except (requests.RequestException, ValueError) as exc:
            logger.error("Language detection failed: %s", exc)
            return "en"

        if isinstance(data, list) and len(data) > 2 and data[2]:
            return str(data[2])
        return "en"


def _translate_element(
    element: ContentElement,
    translator: Translator,
    source_lang: str,
    target_lang: str,
) -> ContentElement:
    """Return a translated copy of ``element``."""

    def translate(text: str) -> str:
        return translator.translate_span(text, source_lang, target_lang)

    if isinstance(element, Image):
        return evolve(element, alt=translate(element.alt))
    if isinstance(element, ItemList):
        return evolve(element, items=[translate(i) for i in element.items])
    return evolve(element, text=translate(element.text))


def translate_article(
    article: ArticleDocument,
    translator: Translator,
    target_lang: str,
    source_lang: str = "auto",
) -> ArticleDocument:
    """Return a copy of ``article`` with all its text translated.

    The result has exactly one element per source element. Author and
    publication date are kept as they are. Elements whose translation
    fails are kept untranslated.

    Args:
        article: Extracted article.
        translator: Translation service.
        target_lang: Target language name or code.
        source_lang: Source language code, ``"auto"`` to detect.

    Returns:
        The translated article.
    """

    target = language_code(target_lang)
    logger.debug(
        "Translating article with %d elements to %s",
        len(article.content),
        target,
    )

    content = []
    for index, element in enumerate(article.content, start=1):
        try:
            element = _translate_element(
                element, translator, source_lang, target
            )
        except Exception:
            logger.exception("Failed to translate element %d", index)
        content.append(element)

    return evolve(
        article,
        title=translator.translate_span(article.title, source_lang, target),
        content=content,
    )


def translate_keywords(
    keywords: Iterable[str],
    translator: Translator,
    target_lang: str,
    source_lang: str = "auto",
) -> list[str]:
    """Translate each keyword into ``target_lang``.

    Args:
        keywords: Keywords as entered by the user.
        translator: Translation service.
        target_lang: Target language name or code.
        source_lang: Source language code, ``"auto"`` to detect.

    Returns:
        Translated keywords in input order; blank keywords are dropped.
    """

    target = language_code(target_lang)
    return [
        translator.translate_span(keyword, source_lang, target)
        for keyword in unique_keywords(keywords)
    ]
