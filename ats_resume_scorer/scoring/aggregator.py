"""Weighted overall score, letter grade and ATS compatibility verdict."""

from typing import Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ats_resume_scorer.config import CATEGORY_WEIGHTS, PASSING_SCORE
from ats_resume_scorer.schemas.analysis import AggregateScore, ATSCompatibility, CategoryScore, Grade
from ats_resume_scorer.utils.helpers import clamp_score

STATUS_PASS = "ATS-Friendly"
STATUS_FAIL = "Needs Improvement"

# Minimum score for each grade, best first
GRADE_THRESHOLDS: Tuple[Tuple[int, Grade], ...] = (
    (90, Grade.A_PLUS),
    (85, Grade.A),
    (80, Grade.A_MINUS),
    (75, Grade.B_PLUS),
    (70, Grade.B),
    (65, Grade.B_MINUS),
    (60, Grade.C_PLUS),
    (55, Grade.C),
    (50, Grade.C_MINUS),
    (45, Grade.D_PLUS),
    (40, Grade.D),
)

# (minimum score, recommendation)
COMPATIBILITY_RECOMMENDATIONS: Tuple[Tuple[int, str], ...] = (
    (85, "Excellent ATS compatibility. Your resume should pass most ATS systems."),
    (70, "Good ATS compatibility. Minor improvements recommended."),
    (55, "Moderate ATS compatibility. Several improvements needed."),
    (0, "Poor ATS compatibility. Significant improvements required."),
)

# (minimum score, percentile)
PERCENTILE_BANDS: Tuple[Tuple[int, int], ...] = ((85, 90), (75, 75), (65, 60), (55, 40), (0, 25))

LOW_CATEGORY_SCORE = 60
HIGH_CATEGORY_SCORE = 80


class ScoringWeights(BaseModel):
    """Category weights; immutable and passed explicitly to the aggregator."""

    model_config = ConfigDict(frozen=True)

    keywords: float = Field(default=CATEGORY_WEIGHTS["keywords"], ge=0, le=1)
    formatting: float = Field(default=CATEGORY_WEIGHTS["formatting"], ge=0, le=1)
    content: float = Field(default=CATEGORY_WEIGHTS["content"], ge=0, le=1)
    structure: float = Field(default=CATEGORY_WEIGHTS["structure"], ge=0, le=1)

    @model_validator(mode="after")
    def _weights_sum_to_one(self) -> "ScoringWeights":
        total = self.keywords + self.formatting + self.content + self.structure
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"category weights must sum to 1.0, got {total:.3f}")
        return self

    def as_dict(self) -> Dict[str, float]:
        return self.model_dump()


DEFAULT_WEIGHTS = ScoringWeights()


def grade_for(score: int) -> Grade:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return Grade.F


def status_for(score: int, passing_score: int = PASSING_SCORE) -> str:
    return STATUS_PASS if score >= passing_score else STATUS_FAIL


def assess_compatibility(
    overall_score: int,
    category_scores: Mapping[str, CategoryScore],
    passing_score: int = PASSING_SCORE,
) -> ATSCompatibility:
    issues = []
    strengths = []
    for name, category in category_scores.items():
        if category.score < LOW_CATEGORY_SCORE:
            issues.append(f"Low {name} score ({category.score}%)")
        elif category.score >= HIGH_CATEGORY_SCORE:
            strengths.append(f"Strong {name} performance ({category.score}%)")

    recommendation = next(text for minimum, text in COMPATIBILITY_RECOMMENDATIONS if overall_score >= minimum)
    percentile = next(p for minimum, p in PERCENTILE_BANDS if overall_score >= minimum)
    if overall_score >= 55:
        comparison = f"Your resume outperforms {percentile}% of typical resumes"
    else:
        comparison = "Your resume needs improvement to compete effectively"

    return ATSCompatibility(
        score=overall_score,
        status=status_for(overall_score, passing_score),
        issues=tuple(issues),
        strengths=tuple(strengths),
        recommendation=recommendation,
        percentile=percentile,
        comparison=comparison,
    )


def aggregate(
    category_scores: Mapping[str, CategoryScore],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    passing_score: int = PASSING_SCORE,
) -> AggregateScore:
    """
    overall = round(sum(weight_c * score_c)) over the four categories.
    A missing category counts as 0.
    """
    weighted = sum(
        weight * (category_scores[name].score if name in category_scores else 0)
        for name, weight in weights.as_dict().items()
    )
    overall = clamp_score(round(weighted, 6))
    return AggregateScore(
        overall_score=overall,
        grade=grade_for(overall),
        status=status_for(overall, passing_score),
        compatibility=assess_compatibility(overall, category_scores, passing_score),
    )
