from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level() -> str:
    """Level name from GUESSING_GAME_LOG_LEVEL; unknown names fall back to WARNING."""

    level = os.environ.get("GUESSING_GAME_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in logging.getLevelNamesMapping():
        return DEFAULT_LOG_LEVEL
    return level


def configure_logging() -> None:
    # basicConfig logs to stderr, which keeps stdout for game text only.
    logging.basicConfig(level=get_log_level())
