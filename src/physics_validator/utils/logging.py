"""Logging helpers for library users, examples and scripts."""

from __future__ import annotations

import logging


def configure_logging(level: int = logging.INFO) -> None:
    """Configure a minimal logging setup for examples and scripts.

    Args:
        level: Root logger level passed to :func:`logging.basicConfig`.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
