"""Logging setup shared by every pipeline stage."""

import logging
import sys
from typing import Optional, Union

from ats_resume_scorer.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _stdout_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Logger with a single stdout handler. The first call for a name applies
    LOG_LEVEL from the environment; an explicit level always wins.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(_stdout_handler())
        logger.setLevel(LOG_LEVEL)
    if level is not None:
        logger.setLevel(level)
    return logger
