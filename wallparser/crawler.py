from __future__ import annotations

import asyncio
import enum
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Sequence

from wallparser.dom import DocumentNode
from wallparser.models import Post
from wallparser.relevance import RelevanceClassifier
from wallparser.text_normalizer import TextNormalizer
from wallparser.wall_extractor import WallExtractor

logger = logging.getLogger(__name__)

SleepFn = Callable[[float], Awaitable[None]]


class CrawlState(enum.Enum):
    IDLE = "idle"
    EXTRACTING = "extracting"
    DELAYING = "delaying"
    DONE = "done"


@dataclass(frozen=True)
class CrawlOptions:
    keywords: Optional[Sequence[str]] = None
    delay_sec: float = 5.0


class CrawlLoop:
    """
    Walks the post nodes of one document, one post at a time.

    Sequential, with a fixed pause between posts to stay polite toward
    the source site. The pause is awaited, so other tasks
    keep running and cancelling the task interrupts it (the partial result
    is dropped).

    Skips individual posts that fail extraction, but does not hide errors
    silently: each skip is logged and counted in `skipped`.
    """

    def __init__(
            self,
            extractor: Optional[WallExtractor] = None,
            normalizer: Optional[TextNormalizer] = None,
            sleep: SleepFn = asyncio.sleep,
    ):
        self._extractor = extractor or WallExtractor()
        self._normalizer = normalizer or TextNormalizer()
        self._sleep = sleep
        self.state = CrawlState.IDLE
        self.skipped = 0

    async def run(self, document: DocumentNode, options: CrawlOptions) -> list[Post]:
        """
        Extract (and optionally filter) every post of the document.

        - Keeps document order; filtering removes posts, never reorders
        - Waits options.delay_sec between posts, never after the last one
        """
        self.skipped = 0
        classifier = None
        if options.keywords:
            classifier = RelevanceClassifier(options.keywords, self._normalizer)
            if not classifier.has_keywords:
                logger.info("Keywords produce no stems; filter disabled: keywords=%s", list(options.keywords))
                classifier = None

        nodes = self._extractor.post_nodes(document)
        total = len(nodes)
        posts: list[Post] = []

        for i, node in enumerate(nodes):
            self.state = CrawlState.EXTRACTING
            try:
                post = self._extractor.extract_one(node)
            except Exception as e:
                self.skipped += 1
                logger.warning("Skipping post due to error: index=%s err=%s", i, e)
                post = None

            if post is not None:
                if classifier is None or classifier.is_relevant_post(post.text, post.comments):
                    posts.append(post)
                    logger.info("(%s/%s) Post \"%s...\" processed", i + 1, total, post.text[:30])
                else:
                    logger.info("(%s/%s) Post id=%s not relevant; dropped", i + 1, total, post.id)

            if i < total - 1:
                self.state = CrawlState.DELAYING
                await self._sleep(options.delay_sec)

        self.state = CrawlState.DONE
        if self.skipped:
            logger.warning("Crawl finished with skipped posts: skipped=%s total=%s", self.skipped, total)
        logger.info("Crawl done: kept=%s total=%s", len(posts), total)
        return posts
