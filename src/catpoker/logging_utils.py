from __future__ import annotations

import logging
import os

# Environment switch:
#   CATPOKER_LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
LOG_LEVEL_ENV = "CATPOKER_LOG_LEVEL"


def setup_logging(level: str | None = None) -> None:
    """Call once at program start; the library itself never configures logging."""
    level = (level or os.getenv(LOG_LEVEL_ENV, "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
