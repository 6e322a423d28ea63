"""Root logger configuration for the invoice service."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def init_logging(level: str = "INFO") -> None:
    """Install the default format and apply *level* to the root logger.

    ``basicConfig`` is a no-op once the root logger has handlers (pytest's
    capture handler, or an earlier app), so the level is set explicitly.
    Unknown level names fall back to INFO.
    """
    resolved = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(format=LOG_FORMAT, level=resolved)
    logging.getLogger().setLevel(resolved)
