"""Present filtered movies and open each one in a browser exactly once."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

import typer

from movie_alert.browser import Launcher
from movie_alert.genres import GenreMap, format_genre_names
from movie_alert.schemas.external import Movie
from movie_alert.seen_store import SeenSet, is_seen, mark_seen

logger = logging.getLogger(__name__)


@dataclass
class NotifyReport:
    """Outcome of one notify pass."""

    opened: list[int] = field(default_factory=list)
    already_opened: list[int] = field(default_factory=list)


def movie_url(movie_url_base: str, movie_id: int) -> str:
    """Return the public TMDB page for a movie."""
    return f"{movie_url_base.rstrip('/')}/{movie_id}"


def notify(
    movies: Sequence[Movie],
    genre_map: GenreMap,
    seen: SeenSet,
    launcher: Launcher,
    movie_url_base: str,
    echo: Callable[[str], None] = typer.echo,
) -> NotifyReport:
    """Print a summary for each movie and open the unseen ones.

    ``seen`` is updated in place with every movie opened. The launcher's
    result is ignored; a movie counts as opened once the launch was attempted.
    """
    report = NotifyReport()

    for movie in movies:
        url = movie_url(movie_url_base, movie.id)

        echo("***")
        echo(f"Title: {movie.title}")
        echo(f"Genres: {format_genre_names(movie.genre_ids, genre_map)}")
        echo(f"Release date: {movie.release_date}")
        echo(f"URL: {url}")

        if is_seen(seen, movie.id):
            echo("URL was opened")
            report.already_opened.append(movie.id)
            continue

        launcher(url)
        mark_seen(seen, movie.id)
        report.opened.append(movie.id)
        logger.debug("Opened movie %d", movie.id)

    return report
