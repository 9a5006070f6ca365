"""Persistence of the movie IDs already opened in a browser.

The state file holds a JSON array of movie IDs. It is read once at start-up
and rewritten in full at the end of a run. Saving goes through a temporary
sibling file that is synced and then renamed over the old one, so a failed
save never leaves a half-written file behind.

Concurrent runs are not coordinated: the last one to save wins.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Annotated

from pydantic import Field, TypeAdapter, ValidationError

from movie_alert.errors import PersistedStateError, StateDirection, StateFileError

logger = logging.getLogger(__name__)

SeenSet = set[int]

# Strict so that true, 1.5 and "7" are rejected rather than coerced
_SEEN_IDS = TypeAdapter(list[Annotated[int, Field(strict=True, ge=0)]])


def load_seen(path: Path) -> SeenSet:
    """Load the seen movie IDs from ``path``.

    A missing file is a first run and yields an empty set.

    Raises:
        PersistedStateError: If the file exists but is not a JSON array of IDs.
        StateFileError: If the file exists but cannot be read.
    """
    if not path.exists():
        logger.debug("Data file %s does not exist", path)
        return set()

    logger.debug("Data file found, loading %s", path)
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise StateFileError(path, e) from e

    try:
        seen = set(_SEEN_IDS.validate_json(raw))
    except ValidationError as e:
        raise PersistedStateError(StateDirection.LOAD, path, e) from e

    logger.debug("Loaded %d seen movie ids", len(seen))
    return seen


def save_seen(seen: SeenSet, path: Path) -> None:
    """Write ``seen`` to ``path`` atomically.

    Raises:
        StateFileError: If the directory or temporary file cannot be created.
        PersistedStateError: If writing, syncing or replacing the file fails.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f"{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as e:
        raise StateFileError(path, e) from e

    logger.debug("Saving %d seen movie ids to %s", len(seen), path)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(sorted(seen), f)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except (OSError, TypeError, ValueError) as e:
        Path(tmp_name).unlink(missing_ok=True)
        raise PersistedStateError(StateDirection.SAVE, path, e) from e


def is_seen(seen: SeenSet, movie_id: int) -> bool:
    """Return True if the movie was already opened in a previous run."""
    return movie_id in seen


def mark_seen(seen: SeenSet, movie_id: int) -> None:
    """Record that the movie has been opened."""
    seen.add(movie_id)
