from fastapi import APIRouter, Query, Request, Response, status
from fastapi.responses import HTMLResponse

from movie_watchlist.api.deps import StorageDep, TmdbClientDep
from movie_watchlist.api.templating import render_error_page, render_page
from movie_watchlist.core.enums import MovieFlag
from movie_watchlist.exceptions.movie_exceptions import (
    InvalidMovieIdError,
    MovieNotFoundError,
)
from movie_watchlist.inputs.movie import parse_movie_id
from movie_watchlist.models.movie import Movie, MovieCreate, MovieUpdate
from movie_watchlist.schemas.movie import (
    FlagUpdate,
    MovieFlagUpdated,
    MovieSearchResult,
    ReviewUpdate,
)
from movie_watchlist.services import movies as movies_service
from movie_watchlist.services import search as search_service

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("/search", response_model=list[MovieSearchResult])
def search_movies(
    response: Response,
    tmdb_client: TmdbClientDep,
    q: str = Query(""),
) -> list[MovieSearchResult]:
    response.headers["Cache-Control"] = "no-store"
    return search_service.search_movies(tmdb_client=tmdb_client, query=q)


@router.post("", response_model=Movie, status_code=status.HTTP_201_CREATED)
def add_movie(*, storage: StorageDep, movie_create: MovieCreate) -> Movie:
    return movies_service.add_movie(storage=storage, movie_create=movie_create)


@router.put("/{id}", response_model=Movie)
def update_movie(
    *,
    storage: StorageDep,
    id: str,
    movie_update: MovieUpdate | None = None,
) -> Movie:
    return movies_service.update_movie(
        storage=storage,
        movie_id=parse_movie_id(id),
        movie_update=movie_update or MovieUpdate(),
    )


def _set_flag(
    storage: StorageDep,
    id: str,
    flag: MovieFlag,
    body: FlagUpdate | None,
) -> MovieFlagUpdated:
    movie_id = parse_movie_id(id)
    value = getattr(body, flag.value) if body is not None else None
    return movies_service.set_movie_flag(
        storage=storage,
        movie_id=movie_id,
        flag=flag,
        value=value,
    )


@router.put("/{id}/watched", response_model=MovieFlagUpdated)
def set_watched(
    *, storage: StorageDep, id: str, body: FlagUpdate | None = None
) -> MovieFlagUpdated:
    return _set_flag(storage, id, MovieFlag.WATCHED, body)


@router.put("/{id}/liked", response_model=MovieFlagUpdated)
def set_liked(
    *, storage: StorageDep, id: str, body: FlagUpdate | None = None
) -> MovieFlagUpdated:
    return _set_flag(storage, id, MovieFlag.LIKED, body)


@router.put("/{id}/watchlist", response_model=MovieFlagUpdated)
def set_watchlist(
    *, storage: StorageDep, id: str, body: FlagUpdate | None = None
) -> MovieFlagUpdated:
    return _set_flag(storage, id, MovieFlag.WATCHLIST, body)


@router.put("/{id}/review", response_model=Movie)
def set_review(
    *, storage: StorageDep, id: str, body: ReviewUpdate | None = None
) -> Movie:
    movie_id = parse_movie_id(id)
    review = body or ReviewUpdate()
    return movies_service.set_movie_review(
        storage=storage,
        movie_id=movie_id,
        rating=review.rating,
        review=review.review,
    )


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movie(*, storage: StorageDep, id: str) -> Response:
    movies_service.delete_movie(storage=storage, movie_id=parse_movie_id(id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# KEEP AT THE BOTTOM
@router.get("/{id}", response_class=HTMLResponse)
def read_movie_page(
    *,
    request: Request,
    storage: StorageDep,
    tmdb_client: TmdbClientDep,
    id: str,
) -> HTMLResponse:
    try:
        movie = movies_service.get_movie_detail(
            storage=storage,
            tmdb_client=tmdb_client,
            movie_id=parse_movie_id(id),
        )
    except InvalidMovieIdError as e:
        return render_error_page(
            request,
            status_code=e.status_code,
            message="Invalid movie id",
            is_movie_active=True,
        )
    except MovieNotFoundError as e:
        return render_error_page(
            request,
            status_code=e.status_code,
            message="Movie not found",
            is_movie_active=True,
        )
    return render_page(
        request,
        "movie.html",
        {"title": movie.title, "movie": movie, "is_movie_active": True},
    )
