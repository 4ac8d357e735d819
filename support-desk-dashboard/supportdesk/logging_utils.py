"""Logging setup shared by the app pages and services."""

from __future__ import annotations

import logging
from typing import Union

LOGGER_NAME = "supportdesk"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _coerce_level(level: Union[str, int, None]) -> int:
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Union[str, int, None] = None) -> logging.Logger:
    """Attach a single stderr handler to the ``supportdesk`` logger.

    Streamlit re-executes page scripts on every interaction, so this is
    called many times per session and must not stack handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_coerce_level(level))

    for handler in logger.handlers:
        if getattr(handler, "_supportdesk", False):
            return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._supportdesk = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.propagate = False
    return logger
