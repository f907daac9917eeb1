from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from wallparser.models import Comment
from wallparser.text_normalizer import TextNormalizer

logger = logging.getLogger(__name__)


class RelevanceClassifier:
    """
    Keyword relevance by stem overlap.

    A text is relevant when at least one of its stems is also a stem of
    any keyword. Keywords are fixed at construction, so one instance can
    be reused for every post of a crawl.
    """

    def __init__(self, keywords: Sequence[str], normalizer: Optional[TextNormalizer] = None):
        self.keywords = tuple(keywords)
        self._normalizer = normalizer or TextNormalizer()
        self._keyword_stems = frozenset(
            stem for kw in self.keywords for stem in self._normalizer.stems(kw)
        )
        logger.debug("Keyword stems: %s", sorted(self._keyword_stems))

    @property
    def has_keywords(self) -> bool:
        """False when no keyword yields a stem (e.g. only blank or punctuation keywords)."""
        return bool(self._keyword_stems)

    def is_relevant(self, text: str) -> bool:
        if not self._keyword_stems:
            return False
        return not self._keyword_stems.isdisjoint(self._normalizer.stems(text))

    def is_relevant_post(self, post_text: str, comments: Iterable[Comment]) -> bool:
        """Post text first, then comments in order; stops at the first match."""
        if self.is_relevant(post_text):
            return True
        return any(self.is_relevant(_comment_text(c)) for c in comments)


def _comment_text(comment: Comment) -> str:
    # Emoji labels go to the stemmer too; pictographs produce no tokens anyway.
    if not comment.emojis:
        return comment.text
    return " ".join([comment.text, *comment.emojis])


def is_relevant(text: str, keywords: Sequence[str]) -> bool:
    return RelevanceClassifier(keywords).is_relevant(text)


def is_relevant_post(post_text: str, comments: Iterable[Comment], keywords: Sequence[str]) -> bool:
    return RelevanceClassifier(keywords).is_relevant_post(post_text, comments)
