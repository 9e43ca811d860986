"""
Logging setup for MatchPredict.

Modules call ``get_logger(__name__)``. The first call sets up a stdout
handler on the root logger (unless the host app, e.g. Streamlit or pytest,
already did), at the level named by MATCHPREDICT_LOG_LEVEL.
"""

import logging
import os
from typing import Optional

LOG_LEVEL_ENV_VAR = "MATCHPREDICT_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
PACKAGE_LOGGER = "matchpredict"


def resolve_log_level(value: Optional[str]) -> int:
    """Turn a level name such as "debug" into a logging level; INFO if unknown."""
    if not value:
        return logging.INFO
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the named logger (the package logger if ``name`` is None)."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=resolve_log_level(os.environ.get(LOG_LEVEL_ENV_VAR)),
            format=LOG_FORMAT,
        )
    return logging.getLogger(name if name is not None else PACKAGE_LOGGER)
