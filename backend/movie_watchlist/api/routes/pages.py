from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from movie_watchlist.api.deps import StorageDep
from movie_watchlist.api.templating import render_page
from movie_watchlist.services import movies as movies_service

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
def home(request: Request, storage: StorageDep) -> HTMLResponse:
    movies = movies_service.get_unwatched_movies(storage=storage)
    return render_page(
        request,
        "index.html",
        {"title": "Movie Watchlist", "movies": movies, "is_home_active": True},
    )


@router.get("/watched", response_class=HTMLResponse)
def watched(request: Request, storage: StorageDep) -> HTMLResponse:
    movies = movies_service.get_watched_movies(storage=storage)
    return render_page(
        request,
        "watched.html",
        {"title": "Watched Movies", "movies": movies, "is_watched_active": True},
    )
