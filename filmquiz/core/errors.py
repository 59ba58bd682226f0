CONFIGURATION_ERROR_MESSAGE = "TMDB API key not found. Check your .env file."
CATALOG_ERROR_MESSAGE = "Could not fetch recommendations. Please try again."


class FilmquizError(Exception):
    """Base class for errors surfaced to the user."""

    user_message: str = "An unknown error occurred."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.user_message)
        self.user_message = message or self.user_message


class ConfigurationError(FilmquizError):
    """Raised when required configuration (the TMDB API key) is missing."""

    user_message = CONFIGURATION_ERROR_MESSAGE


class CatalogError(FilmquizError):
    """Raised when a batch-critical catalog call (discovery) fails."""

    user_message = CATALOG_ERROR_MESSAGE
