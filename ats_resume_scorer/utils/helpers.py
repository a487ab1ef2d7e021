"""Helper utilities shared by extraction and scoring."""

import math
import re
from typing import Iterable, List, Pattern, Set


def term_pattern(term: str) -> Pattern[str]:
    """
    Case-insensitive whole-term regex for a keyword or skill.
    Uses alphanumeric lookarounds instead of \\b so terms like "C++", "C#"
    and "Node.js" still match on their edges.
    """
    escaped = re.escape(term.strip())
    return re.compile(rf"(?<![A-Za-z0-9]){escaped}(?![A-Za-z0-9])", re.IGNORECASE)


def dedupe_preserve_order(items: Iterable[str], case_insensitive: bool = True) -> List[str]:
    """Remove duplicates keeping the first occurrence."""
    seen: Set[str] = set()
    result: List[str] = []
    for item in items:
        key = item.lower() if case_insensitive else item
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def count_words(text: str) -> int:
    """Whitespace-delimited word count."""
    return len((text or "").split())


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (Python's round() is banker's rounding)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    """Round and clamp a score into [low, high]."""
    return max(low, min(high, round_half_up(value)))
