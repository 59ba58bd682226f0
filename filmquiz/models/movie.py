from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"
TMDB_MOVIE_URL = "https://www.themoviedb.org/movie"
YOUTUBE_EMBED_URL = "https://www.youtube.com/embed"


class Genre(BaseModel):
    id: int
    name: str


class CastMember(BaseModel):
    name: str
    character: str | None = None


class ProductionCompany(BaseModel):
    name: str
    logo_path: str | None = None


class Video(BaseModel):
    key: str
    site: str = "YouTube"
    type: str | None = None
    official: bool = False
    published_at: str | None = None


class Movie(BaseModel):
    """
    TMDB movie record.

    Discovery results only carry the summary fields; runtime, genres, credits,
    financials, similar titles and videos are filled in by later lookups.
    """

    model_config = ConfigDict(extra="ignore")

    id: int
    title: str = ""
    release_date: str | None = None
    overview: str | None = None
    vote_average: float = 0.0
    poster_path: str | None = None
    runtime: int | None = None
    genres: list[Genre] | None = None
    director: str | None = None
    cast: list[CastMember] | None = None
    budget: int | None = None
    revenue: int | None = None
    production_companies: list[ProductionCompany] | None = None
    similar_movies: list[Movie] | None = None
    videos: list[Video] | None = Field(default=None, description="Trailers and clips, newest first as TMDB returns")

    @property
    def release_year(self) -> int | None:
        """Extract year from the release date."""
        if not self.release_date or len(self.release_date) < 4 or not self.release_date[:4].isdigit():
            return None
        return int(self.release_date[:4])

    @computed_field
    @property
    def poster_url(self) -> str | None:
        return f"{TMDB_IMAGE_BASE_URL}{self.poster_path}" if self.poster_path else None

    @computed_field
    @property
    def tmdb_url(self) -> str:
        return f"{TMDB_MOVIE_URL}/{self.id}"

    @computed_field
    @property
    def trailer_url(self) -> str | None:
        """Embed URL of the first YouTube video, if any."""
        for video in self.videos or []:
            if video.site == "YouTube" and video.key:
                return f"{YOUTUBE_EMBED_URL}/{video.key}"
        return None
