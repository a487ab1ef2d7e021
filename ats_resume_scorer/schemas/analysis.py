"""Scoring output schemas: category scores, suggestions and the final analysis result."""

from datetime import datetime
from enum import Enum
from typing import Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ats_resume_scorer.schemas.structured_info import StructuredInfo

Priority = Literal["high", "medium", "low"]
Importance = Literal["high", "medium", "low"]


class Grade(str, Enum):
    """Letter grades, best first."""

    A_PLUS = "A+"
    A = "A"
    A_MINUS = "A-"
    B_PLUS = "B+"
    B = "B"
    B_MINUS = "B-"
    C_PLUS = "C+"
    C = "C"
    C_MINUS = "C-"
    D_PLUS = "D+"
    D = "D"
    F = "F"

    @property
    def rank(self) -> int:
        """0 for F up to 11 for A+; higher is better."""
        members = list(Grade)
        return len(members) - 1 - members.index(self)


class CategoryScore(BaseModel):
    """0-100 score for one rubric category with the reasons behind it."""

    model_config = ConfigDict(frozen=True)

    name: str
    score: int = Field(..., ge=0, le=100)
    issues: Tuple[str, ...] = ()
    strengths: Tuple[str, ...] = ()


class KeywordMatch(BaseModel):
    """Expected keyword found in the resume."""

    model_config = ConfigDict(frozen=True)

    keyword: str
    category: str
    relevance_weight: int
    frequency: int
    importance: Importance
    context: str = ""


class MissingKeyword(BaseModel):
    """Expected keyword absent from the resume."""

    model_config = ConfigDict(frozen=True)

    keyword: str
    category: str
    relevance_weight: int
    importance: Importance
    suggestion: str = ""


class KeywordSuggestion(BaseModel):
    """Where to place a high-importance missing keyword."""

    model_config = ConfigDict(frozen=True)

    keyword: str
    reason: str
    placement: str


class KeywordAnalysis(BaseModel):
    """Keyword category score plus the match details it was computed from."""

    model_config = ConfigDict(frozen=True)

    category_score: CategoryScore
    found: Tuple[KeywordMatch, ...] = ()
    missing: Tuple[MissingKeyword, ...] = ()
    total_matches: int = 0
    density: float = Field(default=0.0, description="Keyword occurrences per 100 words")
    suggestions: Tuple[KeywordSuggestion, ...] = ()


class Suggestion(BaseModel):
    """Actionable improvement suggestion."""

    model_config = ConfigDict(frozen=True)

    category: str
    priority: Priority
    title: str
    description: str


class ATSCompatibility(BaseModel):
    """Overall pass/fail verdict and the category highlights behind it."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100)
    status: str
    issues: Tuple[str, ...] = ()
    strengths: Tuple[str, ...] = ()
    recommendation: str = ""
    percentile: int = 0
    comparison: str = ""


class AggregateScore(BaseModel):
    """Aggregator output: weighted overall score, grade and compatibility."""

    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(..., ge=0, le=100)
    grade: Grade
    status: str
    compatibility: ATSCompatibility


class AnalysisResult(BaseModel):
    """Final, immutable result of one analysis run."""

    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(..., ge=0, le=100)
    grade: Grade
    status: str
    category_scores: Dict[str, CategoryScore]
    found_keywords: Tuple[KeywordMatch, ...] = ()
    missing_keywords: Tuple[MissingKeyword, ...] = Field(default=(), max_length=10)
    keyword_suggestions: Tuple[KeywordSuggestion, ...] = ()
    keyword_density: float = 0.0
    suggestions: Tuple[Suggestion, ...] = Field(default=(), max_length=8)
    ats_compatibility: ATSCompatibility
    structured_info: StructuredInfo
    industry: str
    level: str
    keyword_set_key: Tuple[str, str] = Field(..., description="(industry, level) of the keyword set actually used")
    job_title: Optional[str] = None
    created_at: datetime
