from __future__ import annotations

import logging
import os

from car_showcase.domain.car import MAX_PAGE_LIMIT

DEFAULT_PAGE_SIZE = 12


def log_level() -> int:
    name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)

    if not isinstance(level, int):
        raise RuntimeError(f"LOG_LEVEL '{name}' is not a valid logging level")

    return level


def default_page_size() -> int:
    raw = os.getenv("CATALOG_DEFAULT_PAGE_SIZE")

    if not raw:
        return DEFAULT_PAGE_SIZE

    try:
        size = int(raw)
    except ValueError:
        raise RuntimeError("CATALOG_DEFAULT_PAGE_SIZE must be an integer") from None

    if not 1 <= size <= MAX_PAGE_LIMIT:
        raise RuntimeError(f"CATALOG_DEFAULT_PAGE_SIZE must be between 1 and {MAX_PAGE_LIMIT}")

    return size
