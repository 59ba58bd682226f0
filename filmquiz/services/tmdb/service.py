from typing import Any

import httpx

from filmquiz.core.config import TMDBConfig
from filmquiz.services.tmdb.client import TMDBClient


class TMDBService:
    """
    Service for the TMDB movie endpoints used by the quiz.
    Responses are not cached; every call goes to the network.
    """

    def __init__(self, config: TMDBConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self.client = TMDBClient(
            api_key=config.api_key,
            language=config.language,
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport,
        )

    async def close(self):
        """Close the underlying HTTP client."""
        await self.client.close()

    async def get_discover(
        self,
        with_genres: str | None = None,
        sort_by: str = "popularity.desc",
        page: int = 1,
        **kwargs,
    ) -> dict[str, Any]:
        """Get a page of discover results. Adult titles are always excluded."""
        params = {"page": page, "sort_by": sort_by, "include_adult": "false"}
        if with_genres:
            params["with_genres"] = with_genres
        params.update(kwargs)
        return await self.client.get("/discover/movie", params=params)

    async def get_movie_details(self, movie_id: int) -> dict[str, Any]:
        return await self.client.get(f"/movie/{movie_id}")

    async def get_credits(self, movie_id: int) -> dict[str, Any]:
        return await self.client.get(f"/movie/{movie_id}/credits")

    async def get_similar(self, movie_id: int, page: int = 1) -> dict[str, Any]:
        params = {"page": page}
        return await self.client.get(f"/movie/{movie_id}/similar", params=params)

    async def get_videos(self, movie_id: int) -> dict[str, Any]:
        return await self.client.get(f"/movie/{movie_id}/videos")

