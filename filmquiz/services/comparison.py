from collections.abc import Awaitable, Callable

from loguru import logger

from filmquiz.models.movie import Movie
from filmquiz.services.recommendation.enrichment import EnrichmentResult

DEFAULT_COMPARISON_LIMIT = 2


def toggle(current: list[Movie], movie: Movie, limit: int = DEFAULT_COMPARISON_LIMIT) -> list[Movie]:
    """
    Toggle a movie in the comparison set.

    A present movie is removed. An absent one is added only while the set has
    room; once full, adding is a no-op.
    """
    if any(m.id == movie.id for m in current):
        return [m for m in current if m.id != movie.id]
    if len(current) < limit:
        return [*current, movie]
    return list(current)


def replace(current: list[Movie], movie: Movie) -> list[Movie]:
    """Swap in a more detailed record for a movie already in the set."""
    return [movie if m.id == movie.id else m for m in current]


async def toggle_with_details(
    current: list[Movie],
    movie: Movie,
    enricher: Callable[[Movie], Awaitable[EnrichmentResult]],
    limit: int = DEFAULT_COMPARISON_LIMIT,
) -> list[Movie]:
    """
    Toggle a movie and, when it was added, replace it with its enriched record.

    Enrichment failures keep the basic record and are only logged.
    """
    updated = toggle(current, movie, limit=limit)
    added = len(updated) > len(current)
    if not added:
        return updated

    result = await enricher(movie)
    if not result.ok:
        logger.warning(f"Comparison details unavailable for movie {movie.id}: {result.error}")
        return updated
    return replace(updated, result.movie)

