import httpx

from filmquiz.core.config import Settings, settings
from filmquiz.core.errors import ConfigurationError
from filmquiz.services.recommendation.engine import RecommendationEngine
from filmquiz.services.recommendation.enrichment import MovieEnricher
from filmquiz.services.tmdb.service import TMDBService


class Services:
    """
    Process-wide service container built from validated settings.

    The TMDB service is created on first use; a missing API key raises
    ConfigurationError before any request is made.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self.transport = transport
        self._tmdb: TMDBService | None = None

    def config_error(self) -> str | None:
        try:
            self.settings.tmdb_config()
        except ConfigurationError as e:
            return e.user_message
        return None

    def tmdb(self) -> TMDBService:
        if self._tmdb is None:
            self._tmdb = TMDBService(self.settings.tmdb_config(), transport=self.transport)
        return self._tmdb

    def engine(self) -> RecommendationEngine:
        return RecommendationEngine.from_settings(self.settings, self.tmdb())

    def enricher(self) -> MovieEnricher:
        return MovieEnricher(
            self.tmdb(),
            cast_limit=self.settings.ENRICHMENT_CAST_LIMIT,
            similar_limit=self.settings.ENRICHMENT_SIMILAR_LIMIT,
        )

    async def close(self):
        if self._tmdb is not None:
            await self._tmdb.close()
            self._tmdb = None


services = Services(settings)


def get_services() -> Services:
    return services
