from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from movie_api.core.config import Settings
from movie_api.services.movies import MovieService
from movie_api.services.tmdb import TMDbClient

GENRES = [
    {"id": 28, "name": "Action"},
    {"id": 35, "name": "Comedy"},
    {"id": 18, "name": "Drama"},
]


def make_movie(movie_id: int, **overrides: Any) -> dict[str, Any]:
    movie = {
        "id": movie_id,
        "title": f"Movie {movie_id}",
        "overview": f"Overview {movie_id}",
        "release_date": "2024-05-01",
        "genre_ids": [28, 18],
        "vote_average": 7.25,
        "poster_path": f"/poster{movie_id}.jpg",
    }
    movie.update(overrides)
    return movie


class FakeTMDb:
    """Routes httpx requests to canned TMDb payloads and records every call."""

    def __init__(
        self,
        *,
        pages: list[list[dict[str, Any]]] | None = None,
        genres: list[dict[str, Any]] | None = None,
        movies: dict[str, dict[str, Any]] | None = None,
    ) -> None:
        self.pages = pages or []
        self.genres = GENRES if genres is None else genres
        self.movies = movies or {}
        self.requests: list[httpx.Request] = []
        self.overrides: dict[str, Callable[[httpx.Request], httpx.Response]] = {}

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def discover_pages(self) -> list[int]:
        return [int(r.url.params["page"]) for r in self.requests if r.url.path.endswith("/discover/movie")]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/3")
        if path in self.overrides:
            return self.overrides[path](request)
        if path == "/genre/movie/list":
            return httpx.Response(200, json={"genres": self.genres})
        if path == "/discover/movie":
            page = int(request.url.params["page"])
            results = self.pages[page - 1] if page <= len(self.pages) else []
            return httpx.Response(200, json={"page": page, "results": results})
        if path.startswith("/movie/"):
            movie = self.movies.get(path.rsplit("/", 1)[-1])
            if movie is None:
                return httpx.Response(404, json={"status_code": 34, "status_message": "not found"})
            return httpx.Response(200, json=movie)
        return httpx.Response(404)


@pytest.fixture
def settings() -> Settings:
    return Settings(tmdb_api_key="test-key", static_dir="does-not-exist", _env_file=None)


@pytest.fixture
def fake_tmdb() -> FakeTMDb:
    return FakeTMDb()


@pytest.fixture
def tmdb_client(settings, fake_tmdb) -> TMDbClient:
    return TMDbClient(settings, transport=httpx.MockTransport(fake_tmdb.handler))


@pytest.fixture
def movie_service(settings, tmdb_client) -> MovieService:
    return MovieService(tmdb_client, settings=settings)
