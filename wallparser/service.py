from __future__ import annotations

import asyncio
import logging
from typing import Optional, Sequence

from wallparser.crawler import CrawlLoop, CrawlOptions, SleepFn
from wallparser.dom import parse_document
from wallparser.errors import DecodeError, DocumentParseError, FetchError, MissingInputError
from wallparser.http_client import HttpClient, HttpConfig
from wallparser.models import ParseErr, ParseOk, ParseResult
from wallparser.settings import WallParserSettings
from wallparser.text_normalizer import TextNormalizer
from wallparser.wall_extractor import WallExtractor

logger = logging.getLogger(__name__)


class WallParser:
    """
    Fetch one wall page and crawl its posts.

    Failures of the pipeline come back as ParseErr instead of an empty
    list, so callers can tell "request failed" from "wall has no posts".
    """

    def __init__(
            self,
            http: HttpClient,
            keywords: Sequence[str] = (),
            delay_sec: float = 5.0,
            normalizer: Optional[TextNormalizer] = None,
            sleep: Optional[SleepFn] = None,
    ):
        self.http = http
        self.keywords = tuple(keywords)
        self.delay_sec = delay_sec
        self._normalizer = normalizer or TextNormalizer()
        self._sleep = sleep or asyncio.sleep

    @classmethod
    def from_settings(cls, s: WallParserSettings) -> WallParser:
        http = HttpClient(
            HttpConfig(
                timeout_sec=s.request_timeout_sec,
                user_agent=s.user_agent,
                encoding=s.source_encoding,
            )
        )
        return cls(
            http=http,
            keywords=s.keywords,
            delay_sec=s.post_delay_sec,
            normalizer=TextNormalizer(s.stemmer_language),
        )

    async def parse(self, url: Optional[str], keywords: Optional[Sequence[str]] = None) -> ParseResult:
        """
        Raises:
            MissingInputError: if url is empty (nothing is fetched)
        """
        if not url or not url.strip():
            raise MissingInputError("URL не указан")

        try:
            # requests is blocking; keep it off the event loop
            html = await asyncio.to_thread(self.http.fetch_text, url)
            document = parse_document(html)
        except FetchError as e:
            logger.error("Wall fetch failed: url=%s err=%s", url, e)
            return ParseErr(kind="fetch", message=str(e))
        except DecodeError as e:
            logger.error("Wall decode failed: url=%s err=%s", url, e)
            return ParseErr(kind="decode", message=str(e))
        except DocumentParseError as e:
            logger.error("Wall parse failed: url=%s err=%s", url, e)
            return ParseErr(kind="parse", message=str(e))

        loop = CrawlLoop(WallExtractor(), self._normalizer, sleep=self._sleep)
        options = CrawlOptions(
            keywords=self.keywords if keywords is None else tuple(keywords),
            delay_sec=self.delay_sec,
        )
        posts = await loop.run(document, options)
        return ParseOk(posts=posts)
