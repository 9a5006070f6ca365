"""TMDB (The Movie Database) API client service."""

import logging
from typing import Any

from pydantic import ValidationError

from movie_alert.config import get_settings
from movie_alert.errors import CredentialMissingError, RemoteCallError
from movie_alert.genres import GenreMap
from movie_alert.schemas.external import AggregatedUpcoming, GenreListResponse, UpcomingPage
from movie_alert.services.base import APIError, BaseAPIClient

logger = logging.getLogger(__name__)


class TMDBClient(BaseAPIClient):
    """Client for The Movie Database (TMDB) v3 API.

    Provides methods to fetch the movie genre catalog and every page of
    upcoming movies. Authenticates with the ``api_key`` query parameter.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        language: str | None = None,
        region: str | None = None,
    ) -> None:
        """Initialize the TMDB client.

        Args:
            api_key: TMDB v3 API key. If not provided, uses settings.
            base_url: TMDB base URL. If not provided, uses settings.
            timeout: Request timeout in seconds. If not provided, uses settings.
            language: Response language code. If not provided, uses settings.
            region: Release region for upcoming movies. If not provided, uses settings.

        Raises:
            CredentialMissingError: If no API key is available.
        """
        settings = get_settings()
        self._api_key = api_key or settings.tmdb_api_key
        self.language = language or settings.tmdb_language
        self.region = region or settings.tmdb_region

        if not self._api_key:
            raise CredentialMissingError()

        super().__init__(
            base_url=base_url or settings.tmdb_base_url,
            timeout=timeout or settings.request_timeout,
        )

    @property
    def default_headers(self) -> dict[str, str]:
        """Return default headers for TMDB requests."""
        return {"Accept": "application/json"}

    @property
    def default_params(self) -> dict[str, Any]:
        """Return the API key and language sent with every request."""
        return {"api_key": self._api_key, "language": self.language}

    async def get_genres(self) -> GenreMap:
        """Fetch the movie genre catalog.

        Returns:
            Mapping of genre ID to genre name, in catalog order.

        Raises:
            RemoteCallError: If the request fails or the body is malformed.
        """
        context = "cannot get movie genres"
        try:
            data = await self.get("/genre/movie/list")
            response = GenreListResponse.model_validate(data)
        except (APIError, ValidationError) as e:
            raise RemoteCallError(context, e) from e

        logger.debug("Got %d genres", len(response.genres))
        return {genre.id: genre.name for genre in response.genres}

    async def get_upcoming_page(self, page: int) -> UpcomingPage:
        """Fetch one page of upcoming movies.

        Args:
            page: Page number (1-based).

        Returns:
            The decoded page.

        Raises:
            RemoteCallError: If the request fails or the body is malformed.
        """
        logger.debug("Getting upcoming movies, page=%d", page)
        params = {"page": page, "region": self.region}

        try:
            data = await self.get("/movie/upcoming", params=params)
        except APIError as e:
            raise RemoteCallError(
                f"cannot get upcoming movies for page {page}", e, page=page
            ) from e

        try:
            return UpcomingPage.model_validate(data)
        except ValidationError as e:
            raise RemoteCallError(
                f"cannot parse upcoming movie response for page {page}", e, page=page
            ) from e

    async def fetch_all_upcoming(self) -> AggregatedUpcoming:
        """Fetch every page of upcoming movies into one collection.

        Page 1 is authoritative for the page count, result count and
        release window. Later pages only contribute their results. Pages
        are fetched one at a time and the first failure aborts the whole
        fetch.

        Returns:
            All movies in page order plus the page 1 date range and totals.

        Raises:
            RemoteCallError: Naming the page that failed.
        """
        first_page = await self.get_upcoming_page(1)
        logger.debug("Total # of pages for upcoming movies: %d", first_page.total_pages)
        logger.debug("Total # of upcoming movies returned by page 1: %d", first_page.total_results)

        movies = list(first_page.results)
        for page in range(2, first_page.total_pages + 1):
            next_page = await self.get_upcoming_page(page)
            movies.extend(next_page.results)

        return AggregatedUpcoming(
            movies=movies,
            min_date=first_page.dates.minimum,
            max_date=first_page.dates.maximum,
            total_pages=first_page.total_pages,
            total_results=first_page.total_results,
        )
