from collections.abc import Callable

from filmquiz.models.movie import Movie

# Bands overlap on purpose; each call applies a single bucket.
RUNTIME_BUCKETS: dict[str, Callable[[int], bool]] = {
    "short": lambda runtime: runtime < 100,
    "medium": lambda runtime: 90 <= runtime <= 130,
    "long": lambda runtime: runtime > 120,
}


def passes_runtime_filter(movie: Movie, length_preference: str | None) -> bool:
    # Missing runtime can't be excluded; TMDB reports unknown runtimes as 0.
    if not movie.runtime:
        return True
    check = RUNTIME_BUCKETS.get(length_preference or "")
    if check is None:
        return True
    return check(movie.runtime)


def filter_by_runtime(movies: list[Movie], length_preference: str | None) -> list[Movie]:
    """Keep movies whose runtime falls in the requested length bucket."""
    return [movie for movie in movies if passes_runtime_filter(movie, length_preference)]
