from __future__ import annotations

import logging
import sys
from typing import Optional

from exactrref import config


def _has_stderr_handler(log: logging.Logger) -> bool:
    return any(
        type(h) is logging.StreamHandler and h.stream is sys.stderr
        for h in log.handlers
    )


def setup_logging(log: logging.Logger, level: Optional[str] = None) -> None:
    """
    Attach a stderr handler to log; level defaults to EXACTRREF_LOG_LEVEL.
    Calling it again only updates the level.
    """
    if not _has_stderr_handler(log):
        handler = logging.StreamHandler(stream=sys.stderr)
        formatter = logging.Formatter(
            "[{asctime}] [{levelname:<8}] {message}", "%Y-%m-%d %H:%M:%S", style="{"
        )
        handler.setFormatter(formatter)
        log.addHandler(handler)
    log.setLevel(level or config.EXACTRREF_LOG_LEVEL)
