from typing import Protocol

from movie_watchlist.models.movie import Movie


class MovieStorage(Protocol):
    """Whole-collection persistence for movie records.

    Implementations hand back the full collection on ``load`` and replace it
    wholesale on ``save``. There is no locking between the two calls, so two
    concurrent read-modify-write cycles can lose an update.
    """

    def load(self) -> list[Movie]: ...

    def save(self, movies: list[Movie]) -> None: ...
