from logging import getLogger
from typing import Any

from movie_watchlist.core.enums import MovieFlag
from movie_watchlist.crud import movie as movies_crud
from movie_watchlist.exceptions.movie_exceptions import (
    MovieAlreadyExistsError,
    MovieNotFoundError,
    MovieTitleMissingError,
)
from movie_watchlist.inputs.movie import parse_rating, parse_year
from movie_watchlist.models.movie import Movie, MovieBase, MovieCreate, MovieUpdate
from movie_watchlist.schemas.movie import MovieDetail, MovieFlagUpdated
from movie_watchlist.storage.base import MovieStorage
from movie_watchlist.tmdb.client import TmdbClient
from movie_watchlist.tmdb.parsing import TmdbMovieDetails

logger = getLogger(__name__)

# Fields a generic update may clear by sending null
NULLABLE_UPDATE_FIELDS = {"year", "poster_path", "rating"}


def get_unwatched_movies(*, storage: MovieStorage) -> list[Movie]:
    return movies_crud.get_movies_by_watched(storage=storage, watched=False)


def get_watched_movies(*, storage: MovieStorage) -> list[Movie]:
    return movies_crud.get_movies_by_watched(storage=storage, watched=True)


def get_movie_by_id(*, storage: MovieStorage, movie_id: int) -> Movie:
    """
    Get a movie by its ID.

    Raises:
        MovieNotFoundError: If the movie with the given ID does not exist.
    """
    movie = movies_crud.get_movie_by_id(storage=storage, id=movie_id)
    if movie is None:
        raise MovieNotFoundError(movie_id)
    return movie


def get_movie_detail(
    *,
    storage: MovieStorage,
    tmdb_client: TmdbClient,
    movie_id: int,
) -> MovieDetail:
    """
    Get a movie enriched with director, cast and runtime from TMDB.

    Movies without a TMDB ID are not looked up and get "Unknown" for all
    three. TMDB failures never surface here, see TmdbClient.get_movie_details.

    Parameters:
        storage (MovieStorage): The movie storage backend.
        tmdb_client (TmdbClient): Client used for the credits lookup.
        movie_id (int): ID of the movie to show.
    Returns:
        MovieDetail: The stored movie plus the enrichment fields.
    Raises:
        MovieNotFoundError: If the movie with the given ID does not exist.
    """
    movie = get_movie_by_id(storage=storage, movie_id=movie_id)
    if movie.tmdb_id:
        details = tmdb_client.get_movie_details(movie.tmdb_id)
    else:
        details = TmdbMovieDetails()
    return MovieDetail(
        **movie.model_dump(),
        director=details.director,
        cast=details.cast,
        runtime=details.runtime,
    )


def add_movie(*, storage: MovieStorage, movie_create: MovieCreate) -> Movie:
    """
    Add a movie to the watchlist.

    Parameters:
        storage (MovieStorage): The movie storage backend.
        movie_create (MovieCreate): Movie data from the request.
    Returns:
        Movie: The stored movie, on the watchlist and unwatched.
    Raises:
        MovieTitleMissingError: If the title is missing or blank.
        MovieAlreadyExistsError: If a movie with the same TMDB ID is stored.
    """
    title = (movie_create.title or "").strip()
    if not title:
        raise MovieTitleMissingError()

    tmdb_id = movie_create.tmdb_id or None
    if tmdb_id is not None:
        existing = movies_crud.get_movie_by_tmdb_id(storage=storage, tmdb_id=tmdb_id)
        if existing is not None:
            raise MovieAlreadyExistsError(tmdb_id)

    movie_base = MovieBase(
        tmdb_id=tmdb_id,
        title=title,
        year=parse_year(movie_create.year),
        poster_path=movie_create.poster_path,
        overview=movie_create.overview or "",
    )
    movie = movies_crud.create_movie(storage=storage, movie_base=movie_base)
    logger.info("Added movie %s (%s) to the watchlist", movie.id, movie.title)
    return movie


def update_movie(
    *,
    storage: MovieStorage,
    movie_id: int,
    movie_update: MovieUpdate,
) -> Movie:
    """
    Apply a partial update. Only fields present in the request are written;
    null is ignored except for fields that may be cleared.

    Raises:
        MovieTitleMissingError: If a blank title is given.
        MovieNotFoundError: If the movie with the given ID does not exist.
    """
    fields: dict[str, Any] = {
        key: value
        for key, value in movie_update.model_dump(exclude_unset=True).items()
        if value is not None or key in NULLABLE_UPDATE_FIELDS
    }
    if "title" in fields:
        fields["title"] = fields["title"].strip()
        if not fields["title"]:
            raise MovieTitleMissingError()
    if "year" in fields:
        fields["year"] = parse_year(fields["year"])

    movie = movies_crud.update_movie(storage=storage, id=movie_id, fields=fields)
    if movie is None:
        raise MovieNotFoundError(movie_id)
    return movie


def set_movie_flag(
    *,
    storage: MovieStorage,
    movie_id: int,
    flag: MovieFlag,
    value: bool | None,
) -> MovieFlagUpdated:
    """
    Set the watched, watchlist or liked flag. A missing value means True.

    Raises:
        MovieNotFoundError: If the movie with the given ID does not exist.
    """
    movie = movies_crud.set_flag(
        storage=storage,
        id=movie_id,
        flag=flag,
        value=True if value is None else value,
    )
    if movie is None:
        raise MovieNotFoundError(movie_id)
    return MovieFlagUpdated(message=f"{flag.value} updated", movie=movie)


def set_movie_review(
    *,
    storage: MovieStorage,
    movie_id: int,
    rating: Any,
    review: str | None,
) -> Movie:
    """
    Overwrite both rating and review. The rating is validated before the
    collection is read, so a bad rating never touches storage.

    Raises:
        InvalidRatingError: If the rating is not null or a whole number 1-5.
        MovieNotFoundError: If the movie with the given ID does not exist.
    """
    parsed_rating = parse_rating(rating)
    movie = movies_crud.update_movie(
        storage=storage,
        id=movie_id,
        fields={"rating": parsed_rating, "review": review or ""},
    )
    if movie is None:
        raise MovieNotFoundError(movie_id)
    return movie


def delete_movie(*, storage: MovieStorage, movie_id: int) -> None:
    """
    Raises:
        MovieNotFoundError: If the movie with the given ID does not exist.
    """
    deleted = movies_crud.delete_movie(storage=storage, id=movie_id)
    if not deleted:
        raise MovieNotFoundError(movie_id)
    logger.info("Deleted movie %s", movie_id)
