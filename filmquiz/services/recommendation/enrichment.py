import asyncio
from typing import Any

from loguru import logger
from pydantic import BaseModel

from filmquiz.models.movie import CastMember, Movie, Video
from filmquiz.services.tmdb.service import TMDBService


class EnrichmentResult(BaseModel):
    """
    Outcome of a per-movie lookup.

    ``movie`` is the enriched record on success and the original record on
    failure, so callers can always render something.
    """

    movie: Movie
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def extract_director(credits: dict[str, Any]) -> str | None:
    for person in credits.get("crew", []) or []:
        if person.get("job") == "Director":
            return person.get("name")
    return None


def extract_cast(credits: dict[str, Any], limit: int = 5) -> list[CastMember]:
    cast = credits.get("cast", []) or []
    return [CastMember(name=actor.get("name", ""), character=actor.get("character")) for actor in cast[:limit]]


class MovieEnricher:
    """Fetches on-demand details (credits, similar titles, trailers) for a single movie."""

    def __init__(self, tmdb_service: TMDBService, cast_limit: int = 5, similar_limit: int = 5):
        self.tmdb_service = tmdb_service
        self.cast_limit = cast_limit
        self.similar_limit = similar_limit

    async def enrich(self, movie: Movie) -> EnrichmentResult:
        """Fetch details, credits and similar titles concurrently and merge them."""
        try:
            details, credits, similar = await asyncio.gather(
                self.tmdb_service.get_movie_details(movie.id),
                self.tmdb_service.get_credits(movie.id),
                self.tmdb_service.get_similar(movie.id),
            )
            data = {**movie.model_dump(), **details}
            data["director"] = extract_director(credits)
            data["cast"] = extract_cast(credits, self.cast_limit)
            data["similar_movies"] = (similar.get("results", []) or [])[: self.similar_limit]
            return EnrichmentResult(movie=Movie.model_validate(data))
        except Exception as e:
            logger.warning(f"Error enriching movie {movie.id}: {e}")
            return EnrichmentResult(movie=movie, error=str(e))

    async def fetch_videos(self, movie: Movie) -> EnrichmentResult:
        try:
            data = await self.tmdb_service.get_videos(movie.id)
            videos = [Video.model_validate(v) for v in data.get("results", []) or []]
            return EnrichmentResult(movie=movie.model_copy(update={"videos": videos}))
        except Exception as e:
            logger.warning(f"Error fetching videos for movie {movie.id}: {e}")
            return EnrichmentResult(movie=movie, error=str(e))

    async def open_detail(self, movie: Movie) -> Movie:
        """
        Build the record shown in the detail view.

        Enrichment and videos run concurrently and degrade independently: a failed
        lookup only leaves its own fields unset.
        """
        enriched, with_videos = await asyncio.gather(self.enrich(movie), self.fetch_videos(movie))
        result = enriched.movie
        if with_videos.ok:
            result = result.model_copy(update={"videos": with_videos.movie.videos})
        return result
