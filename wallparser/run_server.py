from __future__ import annotations

import logging

import uvicorn

from wallparser.api import create_app
from wallparser.settings import load_settings

logger = logging.getLogger(__name__)


def main() -> None:
    s = load_settings()
    logging.basicConfig(
        level=s.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    logger.info("Server starting on http://%s:%s", s.host, s.port)
    uvicorn.run(create_app(), host=s.host, port=s.port)


if __name__ == "__main__":
    main()
