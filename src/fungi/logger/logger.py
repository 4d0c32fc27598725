"""Logging setup for fungi.

The package logs little: DEBUG records for where ``find``, ``every`` and
``some`` stopped scanning. Level and format come from ``FUNGI_LOG_LEVEL`` and
``FUNGI_LOG_FORMAT``; the level defaults to WARNING, so nothing is printed
unless a caller asks for it.
"""

import logging
import sys
import warnings

from pydantic import ValidationError

from fungi.core.config import Settings

__all__ = ["logger", "setup_logger"]


def _load_settings() -> Settings:
    """Read settings from the environment, falling back to defaults.

    A bad ``FUNGI_*`` value must not stop the combinators from importing, so
    it is reported as a warning and the defaults are used instead.
    """
    try:
        return Settings.load()
    except ValidationError as exc:
        warnings.warn(
            f"Ignoring invalid fungi logging settings, using defaults: {exc}",
            RuntimeWarning,
            stacklevel=2,
        )
        return Settings()


def setup_logger(
    name: str = "fungi",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Attach a stdout handler to the named logger the first time it is seen.

    Args:
        name: Logger name, ``"fungi"`` or one of its children
        level: Log level name; falls back to ``FUNGI_LOG_LEVEL``
        format_string: Record format; falls back to ``FUNGI_LOG_FORMAT``

    Returns:
        The logger, untouched if it already had handlers
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    if level is None or format_string is None:
        settings = _load_settings()
        level = level or settings.LOG_LEVEL
        format_string = format_string or settings.LOG_FORMAT

    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False

    return logger


# Package logger used by the combinators in fungi.functional
logger = setup_logger()
