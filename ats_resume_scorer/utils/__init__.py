"""Utility exports."""

from .helpers import (
    clamp_score,
    count_words,
    dedupe_preserve_order,
    round_half_up,
    term_pattern,
)
from .logger import get_logger

__all__ = [
    "get_logger",
    "term_pattern",
    "dedupe_preserve_order",
    "count_words",
    "round_half_up",
    "clamp_score",
]
