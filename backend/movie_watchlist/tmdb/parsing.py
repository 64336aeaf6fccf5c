from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from movie_watchlist.tmdb.config import CAST_SEPARATOR, TOP_CAST_COUNT, UNKNOWN


@dataclass
class TmdbSearchResult:
    tmdb_id: int | None
    title: str | None
    year: str | None
    poster_path: str | None
    overview: str | None


@dataclass
class TmdbMovieDetails:
    director: str = UNKNOWN
    cast: str = UNKNOWN
    runtime: str = UNKNOWN


def parse_release_year(release_date: Any) -> str | None:
    """Return the leading year component of a TMDB ``YYYY-MM-DD`` date."""
    if not isinstance(release_date, str) or not release_date:
        return None
    year = release_date.split("-")[0]
    return year or None


def parse_search_result(payload: dict[str, Any]) -> TmdbSearchResult:
    return TmdbSearchResult(
        tmdb_id=payload.get("id"),
        title=payload.get("title"),
        year=parse_release_year(payload.get("release_date")),
        poster_path=payload.get("poster_path"),
        overview=payload.get("overview"),
    )


def parse_search_results(payload: Any) -> list[TmdbSearchResult]:
    """Map a TMDB search response to simplified results, skipping non-object entries."""
    if not isinstance(payload, dict):
        return []
    results = payload.get("results")
    if not isinstance(results, list):
        return []
    return [parse_search_result(item) for item in results if isinstance(item, dict)]


def _credits_list(payload: dict[str, Any], key: str) -> Sequence[Any]:
    credits = payload.get("credits")
    if not isinstance(credits, dict):
        return []
    value = credits.get(key)
    return value if isinstance(value, list) else []


def parse_director(payload: dict[str, Any]) -> str:
    for member in _credits_list(payload, "crew"):
        if isinstance(member, dict) and member.get("job") == "Director":
            name = member.get("name")
            if isinstance(name, str) and name:
                return name
            break
    return UNKNOWN


def parse_cast(payload: dict[str, Any]) -> str:
    names = [
        actor.get("name")
        for actor in _credits_list(payload, "cast")[:TOP_CAST_COUNT]
        if isinstance(actor, dict)
    ]
    joined = CAST_SEPARATOR.join(name for name in names if isinstance(name, str))
    return joined or UNKNOWN


def parse_runtime(payload: dict[str, Any]) -> str:
    runtime = payload.get("runtime")
    if isinstance(runtime, bool) or not isinstance(runtime, (int, float)) or not runtime:
        return UNKNOWN
    return f"{int(runtime)} minutes"


def parse_movie_details(payload: Any) -> TmdbMovieDetails:
    """Extract director, top cast and runtime from a TMDB movie-with-credits payload."""
    if not isinstance(payload, dict):
        return TmdbMovieDetails()
    return TmdbMovieDetails(
        director=parse_director(payload),
        cast=parse_cast(payload),
        runtime=parse_runtime(payload),
    )
