"""Pydantic schemas for TMDB responses."""

from movie_alert.schemas.external import (
    AggregatedUpcoming,
    DateRange,
    Genre,
    GenreListResponse,
    Movie,
    UpcomingPage,
)

__all__ = [
    "AggregatedUpcoming",
    "DateRange",
    "Genre",
    "GenreListResponse",
    "Movie",
    "UpcomingPage",
]
