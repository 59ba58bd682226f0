from typing import Any

import httpx
import pytest

from filmquiz.core.config import Settings, TMDBConfig
from filmquiz.models.movie import Movie
from filmquiz.services.tmdb.service import TMDBService


def make_movie(movie_id: int, rating: float = 7.0, runtime: int | None = None, **kwargs) -> Movie:
    return Movie(
        id=movie_id,
        title=kwargs.pop("title", f"Movie {movie_id}"),
        vote_average=rating,
        runtime=runtime,
        **kwargs,
    )


class FakeTMDB:
    """In-memory TMDB served through httpx.MockTransport."""

    def __init__(self):
        self.discover_pages: dict[int, list[dict[str, Any]]] = {}
        self.details: dict[int, dict[str, Any]] = {}
        self.credits: dict[int, dict[str, Any]] = {}
        self.similar: dict[int, dict[str, Any]] = {}
        self.videos: dict[int, dict[str, Any]] = {}
        self.failing: set[str] = set()
        # path -> raw 200 body, for malformed payloads
        self.raw: dict[str, str] = {}
        self.requests: list[httpx.Request] = []

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def paths(self) -> list[str]:
        return [self._path(r) for r in self.requests]

    def discover_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if self._path(r) == "/discover/movie"]

    @staticmethod
    def _path(request: httpx.Request) -> str:
        return request.url.path.removeprefix("/3")

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = self._path(request)
        if path in self.failing:
            return httpx.Response(500, json={"status_message": "boom"})
        if path in self.raw:
            return httpx.Response(200, text=self.raw[path])

        if path == "/discover/movie":
            page = int(request.url.params.get("page", "1"))
            return httpx.Response(200, json={"page": page, "results": self.discover_pages.get(page, [])})

        parts = path.strip("/").split("/")
        if parts[0] == "movie":
            movie_id = int(parts[1])
            kind = parts[2] if len(parts) > 2 else "details"
            table = {
                "details": self.details,
                "credits": self.credits,
                "similar": self.similar,
                "videos": self.videos,
            }[kind]
            if movie_id in table:
                return httpx.Response(200, json=table[movie_id])
        return httpx.Response(404, json={"status_message": "not found"})


@pytest.fixture
def fake_tmdb() -> FakeTMDB:
    return FakeTMDB()


@pytest.fixture
def tmdb_config() -> TMDBConfig:
    return TMDBConfig(api_key="test-key")


@pytest.fixture
async def tmdb_service(fake_tmdb, tmdb_config):
    service = TMDBService(tmdb_config, transport=fake_tmdb.transport)
    yield service
    await service.close()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(TMDB_API_KEY="test-key", HOST_NAME="https://filmquiz.test", _env_file=None)
