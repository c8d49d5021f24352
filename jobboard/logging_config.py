import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
APP_LOGGER = "jobboard"


def resolve_level(level: int | str | None) -> int:
    """Numeric level from an int, a name like "debug", or settings.log_level when None."""
    if level is None:
        from jobboard.config import settings
        level = settings.log_level
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: int | str | None = None, stream: TextIO | None = None) -> None:
    """
    Route logs through a single handler.

    `level` applies to the jobboard loggers; everything else (uvicorn, httpx,
    SQLAlchemy) only gets through at WARNING and above. The API logs to stdout;
    the CLI passes stderr so its own output stays clean.
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger(APP_LOGGER).setLevel(resolve_level(level))
