"""Logging setup for the command-line front ends."""

import logging

from sprig.config import get_log_level


def setup_logging(level: str | None = None) -> None:
    """Configure root logging to stderr at `level` (defaults to SPRIG_LOG_LEVEL)."""
    name = (level or get_log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
