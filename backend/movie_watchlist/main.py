import time
from logging import getLogger
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from movie_watchlist.api.deps import get_tmdb_client
from movie_watchlist.api.main import api_router
from movie_watchlist.core.config import settings
from movie_watchlist.exceptions.handlers import register_exception_handlers
from movie_watchlist.logging_ import setup_logger

STATIC_DIR = Path(__file__).resolve().parent / "static"

logger = getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
app.include_router(api_router)
register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    if settings.is_production:
        return await call_next(request)
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


def log_startup() -> None:
    logger.info("Server running on http://localhost:%s", settings.PORT)
    if not settings.is_production:
        logger.info("ENVIRONMENT: %s", settings.ENVIRONMENT)
        logger.info(
            "TMDB auth present: TMDB_READ_TOKEN=%s, TMDB_API_KEY=%s",
            bool(settings.TMDB_READ_TOKEN),
            bool(settings.TMDB_API_KEY),
        )
    if not get_tmdb_client().has_credentials:
        logger.warning("No TMDB credentials configured, search will fail")


def run() -> None:
    setup_logger("movie_watchlist")
    log_startup()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
