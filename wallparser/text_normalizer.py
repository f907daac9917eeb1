from __future__ import annotations

import re
from typing import Optional, Protocol

from nltk.stem.snowball import SnowballStemmer

# Letters and digits of any script; underscores and punctuation separate tokens.
_TOKEN_RE = re.compile(r"[^\W_]+")


class Stemmer(Protocol):
    def stem(self, word: str) -> str: ...


class TextNormalizer:
    """
    Tokenizer + stemmer for one language.

    Stemming is algorithmic suffix stripping (Snowball), so the same word
    always maps to the same stem and no dictionary data is needed.
    """

    def __init__(self, language: str = "russian", stemmer: Optional[Stemmer] = None):
        self.language = language
        self._stemmer = stemmer or SnowballStemmer(language)

    def tokenize(self, text: str) -> list[str]:
        return _TOKEN_RE.findall((text or "").lower())

    def stem(self, word: str) -> str:
        """Stem one word. Empty or punctuation-only input gives ""."""
        tokens = self.tokenize(word)
        if not tokens:
            return ""
        return self._stemmer.stem(tokens[0])

    def stems(self, text: str) -> set[str]:
        out = {self._stemmer.stem(t) for t in self.tokenize(text)}
        out.discard("")
        return out
