"""Keyword reference corpus and its fallback lookup."""

from ats_resume_scorer.keywords.corpus import (
    InMemoryKeywordRepository,
    KeywordCorpus,
    KeywordRepository,
    get_default_corpus,
    load_seed_keyword_sets,
)

__all__ = [
    "KeywordRepository",
    "InMemoryKeywordRepository",
    "KeywordCorpus",
    "load_seed_keyword_sets",
    "get_default_corpus",
]
