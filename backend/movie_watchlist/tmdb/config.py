"""TMDB endpoints and fixed request parameters."""

TMDB_BASE_URL: str = "https://api.themoviedb.org/3"
TMDB_SEARCH_URL: str = f"{TMDB_BASE_URL}/search/movie"
MOVIE_URL_TEMPLATE: str = f"{TMDB_BASE_URL}/movie/{{id}}"
TMDB_POSTER_BASE_URL: str = "https://image.tmdb.org/t/p/w342"
TMDB_SEARCH_POSTER_BASE_URL: str = "https://image.tmdb.org/t/p/w92"

TMDB_LANGUAGE: str = "en-US"
SEARCH_PARAMS: dict[str, str] = {
    "include_adult": "false",
    "language": TMDB_LANGUAGE,
    "page": "1",
}
DETAILS_PARAMS: dict[str, str] = {
    "append_to_response": "credits",
    "language": TMDB_LANGUAGE,
}

UNKNOWN: str = "Unknown"
TOP_CAST_COUNT: int = 3
CAST_SEPARATOR: str = ", "
