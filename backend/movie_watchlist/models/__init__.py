from .movie import Movie, MovieBase, MovieCreate, MovieUpdate

__all__ = [
    "Movie",
    "MovieBase",
    "MovieCreate",
    "MovieUpdate",
]
