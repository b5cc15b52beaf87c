"""Logging setup shared by the library modules and the CLI."""

from __future__ import annotations

import logging
import sys

from mdrun.config import MDRUN_LOG_LEVEL

_ROOT_LOGGER = "mdrun"
_cli_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the ``mdrun`` namespace."""
    if name != _ROOT_LOGGER and not name.startswith(_ROOT_LOGGER + "."):
        name = f"{_ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(program_name: str, level: str | int | None = None) -> logging.Logger:
    """Install a single stderr handler on the ``mdrun`` logger.

    Messages are prefixed with the program name, the way command line tools
    report errors. Calling this again replaces the previous handler.

    Args:
        program_name: Name shown before every message.
        level: Logging level name or number. Defaults to ``MDRUN_LOG_LEVEL``.

    Returns:
        The configured ``mdrun`` logger.
    """
    global _cli_handler

    logger = logging.getLogger(_ROOT_LOGGER)
    if _cli_handler is not None:
        logger.removeHandler(_cli_handler)

    _cli_handler = logging.StreamHandler(sys.stderr)
    _cli_handler.setFormatter(logging.Formatter(f"{program_name}: %(message)s"))
    logger.addHandler(_cli_handler)

    resolved = MDRUN_LOG_LEVEL if level is None else level
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING
    logger.setLevel(resolved)
    logger.propagate = False
    return logger
