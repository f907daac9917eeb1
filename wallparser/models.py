from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal, Union

from wallparser.errors import DecodeError


@dataclass(frozen=True)
class Page:
    """Raw page bytes as received from the transport, plus the encoding to read them with."""

    url: str
    content: bytes
    encoding: str

    def decode(self) -> str:
        """
        Decode content with the declared encoding. Bytes the encoding does
        not map (0x98 in windows-1251) become U+FFFD instead of failing the page.

        Raises:
            DecodeError: if the encoding itself is unknown
        """
        try:
            return self.content.decode(self.encoding, errors="replace")
        except LookupError as e:
            raise DecodeError(f"Cannot decode {self.url} as {self.encoding}: {e}") from e


@dataclass(frozen=True)
class Comment:
    """One reply under a post. `text` holds direct text only, never emoji labels."""

    text: str
    emojis: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Post:
    """Full post object parsed from one post node of a wall page."""

    id: str
    author: str
    date: str
    text: str
    images: list[str] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


ErrorKind = Literal["fetch", "decode", "parse"]


@dataclass(frozen=True)
class ParseOk:
    posts: list[Post]

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ParseErr:
    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False


ParseResult = Union[ParseOk, ParseErr]
