"""Extraction of structured articles from HTML pages."""

from .article_document import ArticleDocument
from .extract_article import extract_article
from .fetch_article import fetch_article, fetch_html
from .heading import Heading
from .image import Image
from .item_list import ItemList
from .paragraph import Paragraph

__all__ = [
    "ArticleDocument",
    "Heading",
    "Image",
    "ItemList",
    "Paragraph",
    "extract_article",
    "fetch_article",
    "fetch_html",
]
