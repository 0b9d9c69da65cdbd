"""Root logger setup for the desktop shell.

``MINDMAP_LOG_LEVEL`` (a level name such as ``warning`` or a number) wins over
everything; otherwise a truthy ``MINDMAP_DEBUG`` selects DEBUG. Without either,
the ``debug_logging`` setting decides between DEBUG and INFO.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "MINDMAP_LOG_LEVEL"
DEBUG_ENV = "MINDMAP_DEBUG"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def env_log_level() -> Optional[int]:
    """Return the level requested through the environment, if any."""
    raw = (os.getenv(LOG_LEVEL_ENV) or "").strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper()) if raw else None
    if isinstance(level, int):
        return level
    if (os.getenv(DEBUG_ENV) or "").strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None


def env_forces_debug() -> bool:
    level = env_log_level()
    return level is not None and level <= logging.DEBUG


def configure_root() -> int:
    """Install the console handler once and return the effective level."""
    level = env_log_level() or logging.INFO
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")
    root.setLevel(level)
    return level


def apply_debug_setting(debug_logging: bool) -> int:
    """Switch the root level for the stored setting unless the env pins it."""
    level = env_log_level()
    if level is None:
        level = logging.DEBUG if debug_logging else logging.INFO
    logging.getLogger().setLevel(level)
    return level
