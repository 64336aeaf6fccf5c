from .client import TmdbClient
from .parsing import TmdbMovieDetails, TmdbSearchResult

__all__ = [
    "TmdbClient",
    "TmdbMovieDetails",
    "TmdbSearchResult",
]
