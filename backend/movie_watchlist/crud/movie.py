from typing import Any

from movie_watchlist.core.enums import MovieFlag
from movie_watchlist.models.movie import Movie, MovieBase
from movie_watchlist.storage.base import MovieStorage


def get_movies(*, storage: MovieStorage) -> list[Movie]:
    """
    Retrieve every stored movie in insertion order.

    Parameters:
        storage (MovieStorage): The movie storage backend.
    Returns:
        list[Movie]: All movies, empty when the storage is missing or corrupt.
    """
    return storage.load()


def get_movies_by_watched(*, storage: MovieStorage, watched: bool) -> list[Movie]:
    return [movie for movie in storage.load() if movie.watched is watched]


def get_movie_by_id(*, storage: MovieStorage, id: int) -> Movie | None:
    """
    Retrieve a movie by its ID.

    Parameters:
        storage (MovieStorage): The movie storage backend.
        id (int): The ID of the movie to retrieve.
    Returns:
        Movie | None: The movie if found, otherwise None.
    """
    return _find(storage.load(), id)


def get_movie_by_tmdb_id(
    *,
    storage: MovieStorage,
    tmdb_id: int | str,
) -> Movie | None:
    """
    Retrieve a movie by its TMDB ID. IDs are compared as strings so that
    records written with a string tmdb_id still match.
    """
    wanted = str(tmdb_id)
    for movie in storage.load():
        if movie.tmdb_id is not None and str(movie.tmdb_id) == wanted:
            return movie
    return None


def next_id(movies: list[Movie]) -> int:
    # Survives deletions, unlike len(movies) + 1
    return max((movie.id for movie in movies), default=0) + 1


def create_movie(*, storage: MovieStorage, movie_base: MovieBase) -> Movie:
    """
    Append a new movie to the collection and persist it.

    Parameters:
        storage (MovieStorage): The movie storage backend.
        movie_base (MovieBase): Validated movie data without an ID.
    Returns:
        Movie: The stored movie with its newly assigned ID and default flags.
    """
    movies = storage.load()
    movie = Movie(id=next_id(movies), **movie_base.model_dump())
    movies.append(movie)
    storage.save(movies)
    return movie


def update_movie(
    *,
    storage: MovieStorage,
    id: int,
    fields: dict[str, Any],
) -> Movie | None:
    """
    Overwrite the given fields on a stored movie and persist the collection.
    Returns None without writing if the movie does not exist.
    """
    movies = storage.load()
    movie = _find(movies, id)
    if movie is None:
        return None
    for key, value in fields.items():
        setattr(movie, key, value)
    storage.save(movies)
    return movie


def set_flag(
    *,
    storage: MovieStorage,
    id: int,
    flag: MovieFlag,
    value: bool,
) -> Movie | None:
    """
    Set one of the watched/watchlist/liked flags.

    Marking a movie watched takes it off the watchlist, and putting it on the
    watchlist marks it unwatched. Clearing either flag leaves the other alone.
    """
    fields: dict[str, Any] = {flag.value: value}
    if flag is MovieFlag.WATCHED and value:
        fields[MovieFlag.WATCHLIST.value] = False
    if flag is MovieFlag.WATCHLIST and value:
        fields[MovieFlag.WATCHED.value] = False
    return update_movie(storage=storage, id=id, fields=fields)


def delete_movie(*, storage: MovieStorage, id: int) -> bool:
    """
    Remove a movie from the collection.

    Returns:
        bool: True if a movie was removed, False if no movie had that ID.
    """
    movies = storage.load()
    remaining = [movie for movie in movies if movie.id != id]
    if len(remaining) == len(movies):
        return False
    storage.save(remaining)
    return True


def _find(movies: list[Movie], id: int) -> Movie | None:
    return next((movie for movie in movies if movie.id == id), None)
