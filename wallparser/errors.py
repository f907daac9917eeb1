from __future__ import annotations


class WallParserError(Exception):
    """Base exception for all wall parser errors."""


class MissingInputError(WallParserError):
    """Raised when no page URL was supplied."""


class FetchError(WallParserError):
    """Raised on transport failure or a non-2xx HTTP status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(WallParserError):
    """Raised when page bytes are not valid in the source encoding."""


class DocumentParseError(WallParserError):
    """Raised when the decoded page cannot be turned into a document tree."""
