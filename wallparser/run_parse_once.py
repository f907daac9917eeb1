from __future__ import annotations

import asyncio
import json
import logging
import sys

from wallparser.errors import MissingInputError
from wallparser.models import ParseErr
from wallparser.service import WallParser
from wallparser.settings import load_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)

logger = logging.getLogger(__name__)


def main() -> int:
    s = load_settings()
    url = sys.argv[1] if len(sys.argv) > 1 else s.default_url

    parser = WallParser.from_settings(s)
    try:
        result = asyncio.run(parser.parse(url))
    except MissingInputError as e:
        logger.error("%s: pass a wall URL as the first argument or set WALL_URL", e)
        return 2

    if isinstance(result, ParseErr):
        logger.error("Parse failed: kind=%s err=%s", result.kind, result.message)
        return 1

    logger.info("Parsed posts: %s", len(result.posts))
    print(json.dumps([p.to_dict() for p in result.posts], ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
