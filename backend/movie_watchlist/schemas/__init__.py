from .movie import (
    FlagUpdate,
    MovieDetail,
    MovieFlagUpdated,
    MovieSearchResult,
    ReviewUpdate,
)

__all__ = [
    "FlagUpdate",
    "MovieDetail",
    "MovieFlagUpdated",
    "MovieSearchResult",
    "ReviewUpdate",
]
