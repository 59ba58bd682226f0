import asyncio
from datetime import date
from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from filmquiz.core.errors import CatalogError
from filmquiz.models.movie import Movie
from filmquiz.services.tmdb.service import TMDBService

DEFAULT_DISCOVERY_PAGES = 3


def release_date_params(era: str | None, current_year: int | None = None) -> dict[str, str]:
    """
    Map an era answer to discover release-date bounds.

    new: last 5 years, recent: 5-15 years ago, classic: older than 15 years,
    anything else: unbounded.
    """
    year = current_year or date.today().year
    if era == "new":
        return {"primary_release_date.gte": f"{year - 5}-01-01"}
    if era == "recent":
        return {
            "primary_release_date.gte": f"{year - 15}-01-01",
            "primary_release_date.lte": f"{year - 5}-12-31",
        }
    if era == "classic":
        return {"primary_release_date.lte": f"{year - 15}-12-31"}
    return {}


class CatalogFetcher:
    """Handles discovery and per-item detail lookups against TMDB."""

    def __init__(self, tmdb_service: TMDBService, pages: int = DEFAULT_DISCOVERY_PAGES):
        self.tmdb_service = tmdb_service
        self.pages = pages

    async def discover(self, genre_id: str | None, era: str | None, current_year: int | None = None) -> list[Movie]:
        """
        Fetch discovery pages one after another and concatenate the results.

        Raises CatalogError if any page fails.
        """
        date_params = release_date_params(era, current_year)
        movies: list[Movie] = []
        for page in range(1, self.pages + 1):
            try:
                data = await self.tmdb_service.get_discover(with_genres=genre_id, page=page, **date_params)
                if not isinstance(data, dict):
                    raise ValueError(f"unexpected discover payload: {type(data).__name__}")
                movies.extend(Movie.model_validate(item) for item in data.get("results", []) or [])
            except (httpx.HTTPStatusError, httpx.RequestError, ValidationError, ValueError) as e:
                logger.error(f"Discovery failed on page {page} (genre={genre_id}, era={era}): {e}")
                raise CatalogError() from e
        return movies

    async def fetch_item_details(self, movie: Movie) -> Movie:
        """Merge runtime and genres into the record; on failure keep it as is."""
        try:
            details: dict[str, Any] = await self.tmdb_service.get_movie_details(movie.id)
            return Movie.model_validate(
                {
                    **movie.model_dump(),
                    "runtime": details.get("runtime"),
                    "genres": details.get("genres") or [],
                }
            )
        except Exception as e:
            logger.warning(f"Error fetching details for movie {movie.id}: {e}")
            return movie

    async def fetch(self, genre_id: str | None, era: str | None, current_year: int | None = None) -> list[Movie]:
        movies = await self.discover(genre_id, era, current_year)
        return list(await asyncio.gather(*(self.fetch_item_details(m) for m in movies)))
