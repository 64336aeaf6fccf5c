from logging import getLogger

from movie_watchlist.exceptions.tmdb_exceptions import TmdbRequestFailedError
from movie_watchlist.inputs.movie import parse_search_query
from movie_watchlist.schemas.movie import MovieSearchResult
from movie_watchlist.tmdb.client import TmdbClient

logger = getLogger(__name__)


def search_movies(*, tmdb_client: TmdbClient, query: str | None) -> list[MovieSearchResult]:
    """
    Search TMDB for movies to add.

    Parameters:
        tmdb_client (TmdbClient): Client used for the search.
        query (str | None): Raw query string from the request.
    Returns:
        list[MovieSearchResult]: Simplified results, empty when nothing matched.
    Raises:
        EmptySearchQueryError: If the query is blank.
        TmdbCredentialsMissingError: If no TMDB credentials are configured.
        TmdbRequestFailedError: If TMDB could not be reached or answered non-2xx.
    """
    cleaned = parse_search_query(query)
    try:
        results = tmdb_client.search_movies(cleaned)
    except TmdbRequestFailedError as e:
        logger.error("TMDB search failed: %s %s", e.upstream_status, e.upstream_detail)
        raise
    return [
        MovieSearchResult(
            tmdb_id=result.tmdb_id,
            title=result.title,
            year=result.year,
            poster_path=result.poster_path,
            overview=result.overview,
        )
        for result in results
    ]
