from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from movie_watchlist.tmdb.config import (
    TMDB_POSTER_BASE_URL,
    TMDB_SEARCH_POSTER_BASE_URL,
)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.globals["poster_base_url"] = TMDB_POSTER_BASE_URL
templates.env.globals["search_poster_base_url"] = TMDB_SEARCH_POSTER_BASE_URL


def render_page(
    request: Request,
    name: str,
    context: dict[str, Any],
    *,
    status_code: int = 200,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        name,
        context,
        status_code=status_code,
    )


def render_error_page(
    request: Request,
    *,
    status_code: int,
    message: str,
    **context: Any,
) -> HTMLResponse:
    return render_page(
        request,
        "error.html",
        {"title": message, "message": message, **context},
        status_code=status_code,
    )
