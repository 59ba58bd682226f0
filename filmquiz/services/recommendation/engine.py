from loguru import logger

from filmquiz.core.config import Settings
from filmquiz.models.movie import Movie
from filmquiz.models.quiz import AnswerSet
from filmquiz.services.recommendation.fetcher import CatalogFetcher
from filmquiz.services.recommendation.filters import filter_by_runtime
from filmquiz.services.recommendation.scoring import DEFAULT_RESULT_LIMIT, RecommendationScoring
from filmquiz.services.tmdb.service import TMDBService


class RecommendationEngine:
    """
    Runs one completed quiz through fetch, runtime filter, mood/company
    re-rank and the top-N rating cut.
    """

    def __init__(self, fetcher: CatalogFetcher, result_limit: int = DEFAULT_RESULT_LIMIT):
        self.fetcher = fetcher
        self.result_limit = result_limit

    @classmethod
    def from_settings(cls, settings: Settings, tmdb_service: TMDBService | None = None) -> "RecommendationEngine":
        """Build an engine from settings. Raises ConfigurationError when the API key is missing."""
        config = settings.tmdb_config()
        service = tmdb_service or TMDBService(config)
        fetcher = CatalogFetcher(service, pages=settings.DISCOVERY_PAGES)
        return cls(fetcher, result_limit=settings.RESULT_LIMIT)

    async def recommend(self, answers: AnswerSet, current_year: int | None = None) -> list[Movie]:
        movies = await self.fetcher.fetch(answers.get("genre"), answers.get("era"), current_year)
        logger.info(f"Fetched {len(movies)} candidates for genre={answers.get('genre')} era={answers.get('era')}")

        filtered = filter_by_runtime(movies, answers.get("length"))
        logger.debug(f"{len(filtered)} candidates left after runtime filter ({answers.get('length')})")

        ranked = RecommendationScoring.personalize(filtered, answers.get("mood"), answers.get("company"))
        return RecommendationScoring.select_top(ranked, self.result_limit)
