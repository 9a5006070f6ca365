"""Allow running the tool with ``python -m movie_alert``."""

from movie_alert.cli import app

app()
