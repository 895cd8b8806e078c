"""Logging setup for CLI commands."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False, level: str = "WARNING") -> None:
    """Configure root logging on stderr. ``verbose`` forces DEBUG."""
    log_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        level=log_level,
        stream=sys.stderr,
    )
