"""Logging setup shared by the app factory and scripts."""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: str = "INFO") -> None:
    """Install one stderr handler on the root logger; repeated calls replace it."""
    global _handler
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
        _handler.close()

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)
