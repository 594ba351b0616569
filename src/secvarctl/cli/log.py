"""Logging setup for the ``secvarctl`` logger hierarchy.

Every module logs through ``logging.getLogger(__name__)``; this module
attaches the single handler that renders those records.  Rich's
``RichHandler`` is used when Rich is importable, otherwise a plain
stderr handler tagged with the level name.
"""

from __future__ import annotations

import logging

LOGGER_NAME: str = "secvarctl"

DEFAULT_LEVEL: int = logging.WARNING
VERBOSE_LEVEL: int = logging.DEBUG

_PLAIN_FORMAT: str = "%(levelname)s: %(message)s"


def _build_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
        return handler
    return RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )


def configure_logging(level: int = DEFAULT_LEVEL) -> None:
    """Install the diagnostics handler and set the threshold to *level*.

    Calling this again replaces the handler installed by a previous call,
    so the CLI can configure logging before parsing and then again once
    ``-v`` has been seen.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_secvarctl_handler", False):
            logger.removeHandler(handler)

    handler = _build_handler()
    handler._secvarctl_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
