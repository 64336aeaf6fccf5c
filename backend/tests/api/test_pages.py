import re
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from ..fixtures.tmdb import make_tmdb_response


def _listed_ids(html: str) -> set[int]:
    return {int(m) for m in re.findall(r'data-movie-id="(\d+)"', html)}


def test_home_lists_unwatched_movies(client: TestClient, movie_factory) -> None:
    unwatched = movie_factory(title="Arrival")
    watched = movie_factory(title="Heat", watched=True, watchlist=False)

    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<title>Movie Watchlist" in response.text
    assert _listed_ids(response.text) == {unwatched.id}
    assert "Heat" not in response.text
    assert watched.id not in _listed_ids(response.text)


def test_home_empty_collection(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert _listed_ids(response.text) == set()


def test_home_with_corrupt_storage(client: TestClient, storage) -> None:
    storage.path.parent.mkdir(parents=True, exist_ok=True)
    storage.path.write_text("{not json", encoding="utf-8")

    response = client.get("/")

    assert response.status_code == 200
    assert _listed_ids(response.text) == set()


def test_watched_page_lists_watched_movies(client: TestClient, movie_factory) -> None:
    movie_factory(title="Arrival")
    watched = movie_factory(title="Heat", watched=True, watchlist=False, rating=4)

    response = client.get("/watched")

    assert response.status_code == 200
    assert "<title>Watched Movies" in response.text
    assert _listed_ids(response.text) == {watched.id}


def test_movie_page(client: TestClient, tmdb_session: MagicMock, movie_factory) -> None:
    movie = movie_factory(title="Dune", tmdb_id=438631)
    tmdb_session.get.return_value = make_tmdb_response(
        payload={
            "runtime": 155,
            "credits": {
                "crew": [{"job": "Director", "name": "Denis Villeneuve"}],
                "cast": [
                    {"name": "Timothée Chalamet"},
                    {"name": "Rebecca Ferguson"},
                    {"name": "Oscar Isaac"},
                    {"name": "Josh Brolin"},
                ],
            },
        }
    )

    response = client.get(f"/movies/{movie.id}")

    assert response.status_code == 200
    assert "Dune" in response.text
    assert "Denis Villeneuve" in response.text
    assert "Timothée Chalamet, Rebecca Ferguson, Oscar Isaac" in response.text
    assert "Josh Brolin" not in response.text
    assert "155 minutes" in response.text


def test_movie_page_when_tmdb_fails(
    client: TestClient, tmdb_session: MagicMock, movie_factory
) -> None:
    movie = movie_factory(title="Dune", tmdb_id=438631)
    tmdb_session.get.return_value = make_tmdb_response(status_code=500, text="boom")

    response = client.get(f"/movies/{movie.id}")

    assert response.status_code == 200
    assert "Dune" in response.text
    assert "Unknown" in response.text


def test_movie_page_without_tmdb_id(
    client: TestClient, tmdb_session: MagicMock, movie_factory
) -> None:
    movie = movie_factory(title="Home Video", tmdb_id=None)

    response = client.get(f"/movies/{movie.id}")

    assert response.status_code == 200
    assert "Home Video" in response.text
    tmdb_session.get.assert_not_called()


def test_movie_page_invalid_id(client: TestClient) -> None:
    response = client.get("/movies/abc")

    assert response.status_code == 400
    assert response.headers["content-type"].startswith("text/html")
    assert "Invalid movie id" in response.text


def test_movie_page_not_found(client: TestClient) -> None:
    response = client.get("/movies/42")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/html")
    assert "Movie not found" in response.text


def test_unknown_path_renders_not_found_page(client: TestClient) -> None:
    response = client.get("/does/not/exist")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/html")
    assert "Page not found" in response.text


def test_static_assets_are_served(client: TestClient) -> None:
    response = client.get("/static/app.js")

    assert response.status_code == 200


def test_add_watch_and_list_flow(client: TestClient) -> None:
    created = client.post("/movies", json={"title": "Dune", "year": "2021"})
    assert created.status_code == 201
    movie_id = created.json()["id"]

    page = client.get(f"/movies/{movie_id}")
    assert page.status_code == 200
    assert "Dune" in page.text

    watched = client.put(f"/movies/{movie_id}/watched", json={"watched": True})
    assert watched.status_code == 200

    assert movie_id not in _listed_ids(client.get("/").text)
    assert movie_id in _listed_ids(client.get("/watched").text)


def test_pages_expose_search_poster_base_url(client: TestClient) -> None:
    response = client.get("/")

    assert (
        'data-search-poster-base-url="https://image.tmdb.org/t/p/w92"' in response.text
    )
