from dataclasses import dataclass
from logging import getLogger
from typing import Any, Literal

import requests

from movie_watchlist.exceptions.tmdb_exceptions import (
    TmdbCredentialsMissingError,
    TmdbRequestFailedError,
)
from movie_watchlist.tmdb.config import (
    DETAILS_PARAMS,
    MOVIE_URL_TEMPLATE,
    SEARCH_PARAMS,
    TMDB_SEARCH_URL,
)
from movie_watchlist.tmdb.parsing import (
    TmdbMovieDetails,
    TmdbSearchResult,
    parse_movie_details,
    parse_search_results,
)

logger = getLogger(__name__)


@dataclass(frozen=True)
class TmdbAuth:
    type: Literal["bearer", "apikey"]
    value: str


def resolve_auth(read_token: str | None, api_key: str | None) -> TmdbAuth | None:
    """Prefer the v4 read token; fall back to the v3 API key."""
    if read_token:
        return TmdbAuth(type="bearer", value=read_token)
    if api_key:
        return TmdbAuth(type="apikey", value=api_key)
    return None


class TmdbClient:
    def __init__(
        self,
        *,
        read_token: str | None = None,
        api_key: str | None = None,
        timeout: float | None = 10.0,
        session: requests.Session | None = None,
    ):
        self.auth = resolve_auth(read_token, api_key)
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def has_credentials(self) -> bool:
        return self.auth is not None

    def _get_json(self, url: str, params: dict[str, str]) -> Any:
        """
        GET a TMDB endpoint with credentials attached and decode the JSON body.

        Raises:
            TmdbCredentialsMissingError: If no credentials are configured. No
                request is made.
            TmdbRequestFailedError: If the request cannot be made, TMDB answers
                with a non-2xx status, or the body is not JSON.
        """
        if self.auth is None:
            raise TmdbCredentialsMissingError()

        headers: dict[str, str] = {"Accept": "application/json"}
        query = dict(params)
        if self.auth.type == "bearer":
            headers["Authorization"] = f"Bearer {self.auth.value}"
        else:
            query["api_key"] = self.auth.value

        try:
            response = self.session.get(
                url, params=query, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise TmdbRequestFailedError(None, str(e)) from e

        if not response.ok:
            raise TmdbRequestFailedError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise TmdbRequestFailedError(
                response.status_code, "TMDB returned a non-JSON body"
            ) from e

    def search_movies(self, query: str) -> list[TmdbSearchResult]:
        """Search TMDB for movies by title, first page only, adult titles excluded."""
        payload = self._get_json(TMDB_SEARCH_URL, {"query": query, **SEARCH_PARAMS})
        return parse_search_results(payload)

    def get_movie_details(self, tmdb_id: int) -> TmdbMovieDetails:
        """
        Fetch director, top cast and runtime for a TMDB movie.

        Never raises; every failure is logged and yields "Unknown" fields so
        that the detail page still renders.
        """
        url = MOVIE_URL_TEMPLATE.format(id=tmdb_id)
        try:
            payload = self._get_json(url, DETAILS_PARAMS)
        except TmdbRequestFailedError as e:
            logger.error(
                "TMDB details failed for %s: %s %s",
                tmdb_id,
                e.upstream_status,
                e.upstream_detail,
            )
            return TmdbMovieDetails()
        except TmdbCredentialsMissingError as e:
            logger.error("TMDB details skipped for %s: %s", tmdb_id, e.detail)
            return TmdbMovieDetails()
        return parse_movie_details(payload)
