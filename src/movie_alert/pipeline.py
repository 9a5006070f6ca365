"""The movie alert run, from genre catalog to saved state.

Stages run in a fixed order and the first failure propagates to the caller
untouched, skipping every later stage. The seen set is only saved after the
notify stage finished, so a failed run never overwrites the state file.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import typer

from movie_alert.browser import Launcher, make_launcher
from movie_alert.config import Settings
from movie_alert.errors import CredentialMissingError
from movie_alert.genres import filter_by_genre, genre_id_by_name
from movie_alert.notifier import NotifyReport, notify
from movie_alert.seen_store import load_seen, save_seen
from movie_alert.services.tmdb import TMDBClient

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Summary of a completed run."""

    genre_id: int
    upcoming_count: int
    matching_count: int
    state_file: Path
    report: NotifyReport


async def run_pipeline(
    settings: Settings,
    client: TMDBClient | None = None,
    launcher: Launcher | None = None,
    echo: Callable[[str], None] = typer.echo,
) -> PipelineResult:
    """Run every stage once.

    Args:
        settings: Resolved application settings.
        client: TMDB client to use. Built from settings when omitted.
        launcher: Browser launcher. Built from settings when omitted.
        echo: Sink for user-facing output.

    Raises:
        MovieAlertError: The first failure of any stage.
    """
    if not settings.tmdb_api_key:
        raise CredentialMissingError()
    logger.debug("API key is found in env.")

    state_file = settings.resolve_state_file()
    logger.debug("Data file path is: %s", state_file)

    if client is None:
        client = TMDBClient(
            api_key=settings.tmdb_api_key,
            base_url=settings.tmdb_base_url,
            timeout=settings.request_timeout,
            language=settings.tmdb_language,
            region=settings.tmdb_region,
        )
    if launcher is None:
        launcher = make_launcher(settings.browser_command)

    try:
        genre_map = await client.get_genres()

        genre_id = genre_id_by_name(genre_map, settings.target_genre)
        logger.debug("%s genre id is: %d", settings.target_genre, genre_id)

        upcoming = await client.fetch_all_upcoming()
    finally:
        await client.close()
    logger.debug("Total # of upcoming movies: %d", len(upcoming.movies))

    matching = filter_by_genre(genre_id, upcoming.movies)
    echo(
        f"Upcoming {settings.target_genre.lower()} movies "
        f"(from {upcoming.min_date} to {upcoming.max_date}): {len(matching)}"
    )

    seen = load_seen(state_file)
    report = notify(
        matching,
        genre_map,
        seen,
        launcher=launcher,
        movie_url_base=settings.tmdb_movie_url_base,
        echo=echo,
    )
    save_seen(seen, state_file)
    logger.info(
        "Opened %d movie(s), %d already opened before",
        len(report.opened),
        len(report.already_opened),
    )

    return PipelineResult(
        genre_id=genre_id,
        upcoming_count=len(upcoming.movies),
        matching_count=len(matching),
        state_file=state_file,
        report=report,
    )
