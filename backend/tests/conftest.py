from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from movie_watchlist.api.deps import get_storage, get_tmdb_client
from movie_watchlist.main import app
from movie_watchlist.storage.json_file import JsonFileStorage
from movie_watchlist.tmdb.client import TmdbClient

from .fixtures.movies import *
from .fixtures.tmdb import *


@pytest.fixture(scope="function", autouse=True)
def override_dependencies(
    storage: JsonFileStorage,
    tmdb_client: TmdbClient,
) -> Generator[None, None, None]:
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_tmdb_client] = lambda: tmdb_client
    yield
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="function")
def client_without_raise() -> Generator[TestClient, None, None]:
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
