"""Common CLI helper utilities."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(level: str | int = logging.INFO) -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
