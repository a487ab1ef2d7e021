"""Category scorers (keywords, formatting, content, structure) and the score aggregator."""

from ats_resume_scorer.scoring.aggregator import (
    DEFAULT_WEIGHTS,
    GRADE_THRESHOLDS,
    ScoringWeights,
    aggregate,
    grade_for,
    status_for,
)
from ats_resume_scorer.scoring.content_scorer import score_content
from ats_resume_scorer.scoring.formatting_scorer import score_formatting
from ats_resume_scorer.scoring.keyword_scorer import score_keywords
from ats_resume_scorer.scoring.structure_scorer import score_structure

__all__ = [
    "score_keywords",
    "score_formatting",
    "score_content",
    "score_structure",
    "aggregate",
    "grade_for",
    "status_for",
    "ScoringWeights",
    "DEFAULT_WEIGHTS",
    "GRADE_THRESHOLDS",
]
