# mediameta/common/logging.py
from __future__ import annotations

import logging


def get_logger(name: str = "mediameta", level: int | str | None = None) -> logging.Logger:
    """
    Return a named logger for the package.
    If no handlers are set anywhere, we add a basicConfig once so messages are visible.
    `level` defaults to the configured LOG_LEVEL.
    """
    if level is None:
        from mediameta.common.settings import get_settings
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger
