from __future__ import annotations

from wallparser.dom import DocumentNode
from wallparser.models import Comment, Post


class WallExtractor:
    """
    Extracts posts from a wall page document.

    The wall markup is fixed but fragile: every selector below is a class
    name the site uses today. A missing element is never an error, the
    corresponding field is simply empty.
    """

    POST_SELECTOR = ".post"
    TEXT_SELECTOR = ".wall_post_text"
    AUTHOR_SELECTOR = ".post_header .author"
    DATE_SELECTOR = ".post_header .rel_date"
    IMAGE_LINK_SELECTOR = ".page_post_sized_thumbs a"
    REPLY_SELECTOR = ".wall_reply_text"
    EMOJI_SELECTOR = "img.emoji"

    def post_nodes(self, document: DocumentNode) -> list[DocumentNode]:
        return document.find_all(self.POST_SELECTOR)

    def extract(self, document: DocumentNode) -> list[Post]:
        """Extract every post of the document, in document order."""
        return [self.extract_one(node) for node in self.post_nodes(document)]

    def extract_one(self, node: DocumentNode) -> Post:
        return Post(
            id=node.attr("id") or "",
            author=node.text(self.AUTHOR_SELECTOR).strip(),
            date=node.text(self.DATE_SELECTOR).strip(),
            text=node.text(self.TEXT_SELECTOR).strip(),
            images=self._extract_images(node),
            comments=self._extract_comments(node),
        )

    # -------------------------
    # Helpers
    # -------------------------

    def _extract_images(self, node: DocumentNode) -> list[str]:
        # No de-duplication: the same photo linked twice is listed twice
        return [a.attr("href") or "" for a in node.find_all(self.IMAGE_LINK_SELECTOR)]

    def _extract_comments(self, node: DocumentNode) -> list[Comment]:
        comments: list[Comment] = []
        for block in node.find_all(self.REPLY_SELECTOR):
            emojis = [img.attr("alt") or "" for img in block.find_all(self.EMOJI_SELECTOR)]
            comments.append(Comment(text=block.direct_text().strip(), emojis=emojis))
        return comments
