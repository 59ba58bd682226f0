from collections.abc import Callable

from filmquiz.models.movie import Movie

DEFAULT_RESULT_LIMIT = 20

# mood -> (rating predicate, points)
MOOD_RULES: dict[str, tuple[Callable[[float], bool], int]] = {
    "happy": (lambda r: r > 7.0, 2),
    "sad": (lambda r: r > 7.5, 2),
    "excited": (lambda r: r > 6.5, 2),
    "relaxed": (lambda r: 6.0 < r < 8.0, 2),
    "stressed": (lambda r: 6.5 < r < 8.5, 2),
}

# company -> (rating predicate, points)
COMPANY_RULES: dict[str, tuple[Callable[[float], bool], int]] = {
    "family": (lambda r: r > 6.5, 2),
    "partner": (lambda r: r > 7.0, 2),
    "friends": (lambda r: r > 6.0, 1),
    "alone": (lambda r: r > 7.5, 2),
}


class RecommendationScoring:
    """
    Mood/company re-ranking and the final rating cut.
    """

    @staticmethod
    def _rule_score(rules: dict[str, tuple[Callable[[float], bool], int]], key: str | None, rating: float) -> int:
        rule = rules.get(key or "")
        if rule is None:
            return 0
        predicate, points = rule
        return points if predicate(rating) else 0

    @staticmethod
    def mood_score(rating: float, mood: str | None) -> int:
        return RecommendationScoring._rule_score(MOOD_RULES, mood, rating)

    @staticmethod
    def company_score(rating: float, company: str | None) -> int:
        return RecommendationScoring._rule_score(COMPANY_RULES, company, rating)

    @staticmethod
    def score(movie: Movie, mood: str | None, company: str | None) -> int:
        rating = movie.vote_average
        return RecommendationScoring.mood_score(rating, mood) + RecommendationScoring.company_score(rating, company)

    @staticmethod
    def personalize(movies: list[Movie], mood: str | None, company: str | None) -> list[Movie]:
        """Sort by mood/company score, highest first. Ties keep their input order."""
        return sorted(movies, key=lambda m: RecommendationScoring.score(m, mood, company), reverse=True)

    @staticmethod
    def select_top(movies: list[Movie], limit: int = DEFAULT_RESULT_LIMIT) -> list[Movie]:
        """
        Sort by raw rating and keep the first ``limit`` movies.

        This ordering replaces the one from ``personalize``, which then only
        decides the order among equally rated movies.
        """
        return sorted(movies, key=lambda m: m.vote_average, reverse=True)[:limit]
