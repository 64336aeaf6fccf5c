from typing import Any

from sqlmodel import SQLModel

from movie_watchlist.models.movie import Movie

__all__ = [
    "FlagUpdate",
    "MovieDetail",
    "MovieFlagUpdated",
    "MovieSearchResult",
    "ReviewUpdate",
]


class MovieSearchResult(SQLModel):
    tmdb_id: int | None = None
    title: str | None = None
    year: str | None = None
    poster_path: str | None = None
    overview: str | None = None


class MovieDetail(Movie):
    director: str
    cast: str
    runtime: str


class MovieFlagUpdated(SQLModel):
    message: str
    movie: Movie


# Only the flag named in the path is read
class FlagUpdate(SQLModel):
    watched: bool | None = None
    watchlist: bool | None = None
    liked: bool | None = None


class ReviewUpdate(SQLModel):
    # Validated by inputs.movie.parse_rating so bad ratings give a 400, not a 422
    rating: Any = None
    review: str | None = None
