"""Keyword corpus: (industry, level) -> KeywordSet lookup with the general fallback chain."""

import json
from abc import ABC, abstractmethod
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import ValidationError as SchemaValidationError

from ats_resume_scorer.config import GENERAL_KEY, KEYWORD_SEED_PATH
from ats_resume_scorer.errors import KeywordSeedError, LookupFallbackExhausted
from ats_resume_scorer.schemas.keyword_set import KeywordSet
from ats_resume_scorer.utils.logger import get_logger

logger = get_logger(__name__)


class KeywordRepository(ABC):
    """Reference-data boundary: exact-key keyword set lookup, no fallback."""

    @abstractmethod
    def lookup(self, industry: str, level: str) -> Optional[KeywordSet]:
        """Return the keyword set stored under exactly (industry, level), or None."""
        ...


class InMemoryKeywordRepository(KeywordRepository):
    """Keyword sets held in a dict; read-only after construction."""

    def __init__(self, keyword_sets: Iterable[KeywordSet]) -> None:
        self._sets: Dict[Tuple[str, str], KeywordSet] = {}
        for ks in keyword_sets:
            if ks.key in self._sets:
                logger.warning("Duplicate keyword set for %s; keeping the first", ks.key)
                continue
            self._sets[ks.key] = ks

    def lookup(self, industry: str, level: str) -> Optional[KeywordSet]:
        return self._sets.get((industry, level))

    def keys(self) -> List[Tuple[str, str]]:
        return list(self._sets)

    def __len__(self) -> int:
        return len(self._sets)


def load_seed_keyword_sets(path: Optional[Path] = None) -> List[KeywordSet]:
    """
    Load keyword sets from a JSON seed file (a list of KeywordSet objects).
    Raises KeywordSeedError when the file is missing, malformed or fails validation.
    """
    seed_path = Path(path or KEYWORD_SEED_PATH)
    try:
        raw = json.loads(seed_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Cannot read keyword seed %s: %s", seed_path, e)
        raise KeywordSeedError(str(seed_path), str(e)) from e
    if not isinstance(raw, list):
        raise KeywordSeedError(str(seed_path), "top level must be a list of keyword sets")
    try:
        sets = [KeywordSet.model_validate(item) for item in raw]
    except SchemaValidationError as e:
        logger.error("Keyword seed %s failed validation: %s", seed_path, e)
        raise KeywordSeedError(str(seed_path), str(e)) from e
    logger.info("Loaded %s keyword sets from %s", len(sets), seed_path)
    return sets


class KeywordCorpus:
    """
    Resolves the keyword set to score against.
    Fallback chain: (industry, level) -> (industry, "general") -> ("general", "general").
    Sets with no keywords count as absent so scoring never runs against an empty list.
    """

    def __init__(self, repository: KeywordRepository) -> None:
        self._repository = repository

    @staticmethod
    def fallback_chain(industry: str, level: str) -> List[Tuple[str, str]]:
        industry = (industry or "").strip().lower() or GENERAL_KEY
        level = (level or "").strip().lower() or GENERAL_KEY
        chain = [(industry, level), (industry, GENERAL_KEY), (GENERAL_KEY, GENERAL_KEY)]
        return list(dict.fromkeys(chain))

    def resolve(self, industry: str, level: str) -> KeywordSet:
        """Return the first non-empty keyword set along the fallback chain."""
        chain = self.fallback_chain(industry, level)
        for key in chain:
            keyword_set = self._repository.lookup(*key)
            if keyword_set is not None and keyword_set.keywords:
                if key != chain[0]:
                    logger.info("No keyword set for %s; using fallback %s", chain[0], key)
                return keyword_set
        logger.error("Keyword fallback exhausted for %s", chain[0])
        raise LookupFallbackExhausted(*chain[0])


@lru_cache(maxsize=1)
def get_default_corpus() -> KeywordCorpus:
    """Corpus over the configured seed file, loaded once and shared read-only."""
    return KeywordCorpus(InMemoryKeywordRepository(load_seed_keyword_sets()))
