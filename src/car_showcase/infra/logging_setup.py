from __future__ import annotations

import logging

from car_showcase.infra.config import log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging() -> None:
    """Configure root logging once; later calls leave existing handlers alone."""
    logging.basicConfig(level=log_level(), format=LOG_FORMAT)
