"""Command line entry point."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from movie_alert import __version__
from movie_alert.config import get_settings
from movie_alert.errors import MovieAlertError
from movie_alert.pipeline import run_pipeline

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

app = typer.Typer(
    name="movie-alert",
    help="Open upcoming movies of one genre in the browser, once per movie.",
    add_completion=False,
)


def configure_logging(level: str, verbose: int = 0) -> None:
    """Configure root logging; each ``-v`` lowers the level one step."""
    numeric = logging.getLevelName(level)
    numeric = max(logging.DEBUG, numeric - 10 * verbose)
    logging.basicConfig(level=numeric, format=LOG_FORMAT, force=True)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(numeric, logging.WARNING))


@app.command()
def main(
    genre: Annotated[
        Optional[str],
        typer.Option("--genre", "-g", help="Genre to watch (exact TMDB name)"),
    ] = None,
    state_file: Annotated[
        Optional[Path],
        typer.Option("--state-file", help="File storing already opened movie ids"),
    ] = None,
    browser_command: Annotated[
        Optional[str],
        typer.Option("--browser-command", help="Command used to open movie pages"),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Increase verbosity (-v, -vv)"),
    ] = 0,
) -> None:
    """Fetch upcoming TMDB movies and open the new ones of the chosen genre."""
    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging("WARNING", verbose)
        logger.error("Error: invalid configuration")
        logger.error("    %s", e)
        raise typer.Exit(code=1) from e

    overrides = {
        key: value
        for key, value in (
            ("target_genre", genre),
            ("state_file", state_file),
            ("browser_command", browser_command),
        )
        if value is not None
    }
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(settings.log_level, verbose)
    logger.info("Starting movie-alert v%s", __version__)
    for warning in settings.validate_runtime_config():
        logger.warning("  - %s", warning)

    try:
        asyncio.run(run_pipeline(settings))
    except MovieAlertError as e:
        for line in e.diagnostic_lines():
            logger.error("%s", line)
        raise typer.Exit(code=e.exit_code) from e
