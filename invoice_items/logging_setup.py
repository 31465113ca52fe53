"""Logging configuration for the line items form."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from invoice_items import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Install a single stream handler on the package logger."""
    logger = logging.getLogger("invoice_items")
    logger.setLevel((level or config.LOG_LEVEL).upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
