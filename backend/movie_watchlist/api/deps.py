from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from movie_watchlist.core.config import settings
from movie_watchlist.storage.base import MovieStorage
from movie_watchlist.storage.json_file import JsonFileStorage
from movie_watchlist.tmdb.client import TmdbClient


def get_storage() -> MovieStorage:
    return JsonFileStorage(settings.DATA_FILE)


@lru_cache
def get_tmdb_client() -> TmdbClient:
    return TmdbClient(
        read_token=settings.TMDB_READ_TOKEN,
        api_key=settings.TMDB_API_KEY,
        timeout=settings.TMDB_TIMEOUT_SECONDS,
    )


StorageDep = Annotated[MovieStorage, Depends(get_storage)]
TmdbClientDep = Annotated[TmdbClient, Depends(get_tmdb_client)]
