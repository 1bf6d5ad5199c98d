from __future__ import annotations

import logging
import os
from typing import Optional

ROOT_LOGGER = "dynamic_sudoku"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_level(raw: Optional[str]) -> int:
    """Level number for a name like "debug"; unknown or empty names give WARNING."""
    level = logging.getLevelName((raw or "").strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(resolve_level(os.environ.get("SUDOKU_LOG_LEVEL")))
        root.propagate = False
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the package root, e.g. get_logger("engine") -> dynamic_sudoku.engine."""
    root = _configure_root()
    if not name:
        return root
    return root.getChild(name)
