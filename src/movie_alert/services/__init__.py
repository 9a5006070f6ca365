"""External API clients."""

from movie_alert.services.base import APIError, BaseAPIClient
from movie_alert.services.tmdb import TMDBClient

__all__ = [
    "APIError",
    "BaseAPIClient",
    "TMDBClient",
]
