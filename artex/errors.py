"""Exceptions raised by the artex package."""

from __future__ import annotations


class ArtexError(Exception):
    """Base class for all errors raised by artex."""


class FetchError(ArtexError):
    """Raised when the HTML of an article cannot be retrieved.

    Attributes:
        status_code: HTTP status returned by the remote server, if any.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ArticleFormatError(ArtexError, ValueError):
    """Raised when serialized article data does not match the model."""
