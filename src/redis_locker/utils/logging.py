"""Logging helpers for the locker's own loggers."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from rich.logging import RichHandler

from redis_locker.utils.env import get_bool_env, get_str_env


ROOT_LOGGER = "redis_locker"


def _level_from_env() -> int:
    name = (get_str_env("REDIS_LOCKER_LOG_LEVEL") or "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str, level: Optional[int] = None, *, rich: Optional[bool] = None) -> logging.Logger:
    """
    Return ``redis_locker.<name>``, attaching a handler on first use.

    ``level`` defaults to ``REDIS_LOCKER_LOG_LEVEL`` (INFO when unset) and
    ``rich`` to ``REDIS_LOCKER_RICH_LOGS`` (on when unset); set it to ``0``
    for plain stdout lines, e.g. when logs are shipped to a collector.
    """
    logger = logging.getLogger(f"{ROOT_LOGGER}.{name}")
    if logger.handlers:
        return logger

    level = _level_from_env() if level is None else level
    if rich is None:
        rich = get_bool_env("REDIS_LOCKER_RICH_LOGS", default=True)
    logger.setLevel(level)

    handler: logging.Handler
    if rich:
        handler = RichHandler(level=level, markup=False, rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(name)s %(levelname)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    logger.addHandler(handler)
    logger.propagate = False
    return logger
