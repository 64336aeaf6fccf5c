# movie_watchlist/inputs/movie.py

import math
from typing import Any

from movie_watchlist.exceptions.movie_exceptions import (
    InvalidMovieIdError,
    InvalidRatingError,
)
from movie_watchlist.exceptions.tmdb_exceptions import EmptySearchQueryError


def parse_movie_id(value: str) -> int:
    """Parse a path segment into a movie ID, rejecting anything but plain ASCII digits."""
    raw = value.strip()
    # int() alone would also take "+3", "1_0" and non-ASCII digits
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidMovieIdError(value)
    return int(raw)


def parse_year(value: str | int | None) -> str | None:
    """Store years as trimmed text; blank means no year."""
    if value is None:
        return None
    return str(value).strip() or None


def parse_search_query(value: str | None) -> str:
    query = (value or "").strip()
    if len(query) < 1:
        raise EmptySearchQueryError()
    return query


def parse_rating(value: Any) -> int | None:
    """
    Normalise a rating from a request body.

    None and the empty string clear the rating. Numbers and numeric strings
    are accepted when they hold a whole number from 1 to 5; booleans are not
    ratings.
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise InvalidRatingError()

    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError as e:
            raise InvalidRatingError() from e
    elif isinstance(value, (int, float)):
        number = float(value)
    else:
        raise InvalidRatingError()

    if not math.isfinite(number) or not number.is_integer():
        raise InvalidRatingError()
    if number < 1 or number > 5:
        raise InvalidRatingError()
    return int(number)
