from __future__ import annotations

import logging
from typing import Optional, Protocol

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from wallparser.errors import DocumentParseError

logger = logging.getLogger(__name__)


class DocumentNode(Protocol):
    """What the extractor needs from an HTML tree. Selectors are CSS."""

    def find_all(self, selector: str) -> list["DocumentNode"]: ...

    def attr(self, name: str) -> Optional[str]: ...

    def text(self, selector: Optional[str] = None) -> str: ...

    def direct_text(self) -> str: ...


class HtmlNode:
    """DocumentNode over a BeautifulSoup tag (or the whole soup)."""

    def __init__(self, tag: Tag):
        self._tag = tag

    def find_all(self, selector: str) -> list[HtmlNode]:
        # select() returns matches in document order
        return [HtmlNode(t) for t in self._tag.select(selector)]

    def attr(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def text(self, selector: Optional[str] = None) -> str:
        """
        Text of this node, or the concatenated text of every descendant
        matching `selector` ("" when nothing matches).
        """
        if selector is None:
            return self._tag.get_text()
        return "".join(t.get_text() for t in self._tag.select(selector))

    def direct_text(self) -> str:
        """Concatenated text-node children only; nested elements and HTML comments are skipped."""
        return "".join(
            str(child)
            for child in self._tag.children
            if isinstance(child, NavigableString) and not isinstance(child, PreformattedString)
        )


def parse_document(html: str) -> HtmlNode:
    """
    Build a queryable tree from decoded HTML.

    Raises:
        DocumentParseError: if the parser cannot build a tree at all
    """
    try:
        soup = BeautifulSoup(html, "lxml")
    except Exception as e:
        logger.error("HTML parse failed: err=%s", e)
        raise DocumentParseError(f"Cannot parse document: {e}") from e
    return HtmlNode(soup)
