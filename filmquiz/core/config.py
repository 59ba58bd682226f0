from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from filmquiz.core.errors import ConfigurationError


class TMDBConfig(BaseModel):
    """Validated TMDB connection settings handed to the catalog service."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    language: str = "en-US"
    base_url: str = "https://api.themoviedb.org/3"
    timeout: float | None = None


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    TMDB_API_KEY: str | None = None
    TMDB_LANGUAGE: str = "en-US"
    TMDB_BASE_URL: str = "https://api.themoviedb.org/3"
    # None = no explicit timeout, a hung call stalls that request
    TMDB_TIMEOUT_SECONDS: float | None = None
    PORT: int = 8000
    APP_ENV: Literal["development", "production"] = "production"
    HOST_NAME: str = "http://localhost:8000"

    DISCOVERY_PAGES: int = 3
    RESULT_LIMIT: int = 20
    COMPARISON_LIMIT: int = 2
    ENRICHMENT_CAST_LIMIT: int = 5
    ENRICHMENT_SIMILAR_LIMIT: int = 5

    def tmdb_config(self) -> TMDBConfig:
        """Validate the TMDB settings. Raises ConfigurationError without an API key."""
        api_key = (self.TMDB_API_KEY or "").strip()
        if not api_key:
            raise ConfigurationError()
        return TMDBConfig(
            api_key=api_key,
            language=self.TMDB_LANGUAGE,
            base_url=self.TMDB_BASE_URL,
            timeout=self.TMDB_TIMEOUT_SECONDS,
        )


settings = Settings()
