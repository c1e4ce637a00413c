"""Logging configuration helpers for the game."""

from __future__ import annotations

import logging
from logging import Logger
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(debug: bool = False, log_file: Path | None = None) -> Logger:
    """Configure logging for the application and return its logger.

    Records always go to stderr; ``log_file`` adds a UTF-8 file copy.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
    )
    # Players poll /state several times a second
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return logging.getLogger("milhao_app")
