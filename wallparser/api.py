from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from wallparser.errors import MissingInputError
from wallparser.models import ParseErr
from wallparser.service import WallParser
from wallparser.settings import load_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/parse")
async def parse_wall(
    request: Request,
    url: Optional[str] = Query(default=None),
    keywords: Optional[list[str]] = Query(default=None),
):
    parser: WallParser = request.app.state.wall_parser
    try:
        result = await parser.parse(url, keywords=keywords)
    except MissingInputError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except Exception as e:
        logger.exception("Unexpected error while parsing: url=%s", url)
        return JSONResponse(status_code=500, content={"error": str(e)})

    if isinstance(result, ParseErr):
        return JSONResponse(status_code=500, content={"error": result.message, "kind": result.kind})
    return [p.to_dict() for p in result.posts]


@router.get("/health")
async def health():
    return {"status": "ok"}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = load_settings()
    app.state.settings = settings
    parser = WallParser.from_settings(settings)
    app.state.wall_parser = parser
    logger.info(
        "wall parser ready: encoding=%s delay=%.1fs keywords=%s",
        settings.source_encoding,
        settings.post_delay_sec,
        len(settings.keywords),
    )
    yield
    logger.info("shutting down wall parser")
    parser.http.close()


def create_app() -> FastAPI:
    app = FastAPI(title="Wall Parser", lifespan=lifespan)
    app.include_router(router)
    return app


# uvicorn wallparser.api:app
app = create_app()
