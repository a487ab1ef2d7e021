"""Schema exports."""

from .analysis import (
    AggregateScore,
    AnalysisResult,
    ATSCompatibility,
    CategoryScore,
    Grade,
    KeywordAnalysis,
    KeywordMatch,
    KeywordSuggestion,
    MissingKeyword,
    Suggestion,
)
from .document import AnalysisRequest, RawDocument
from .keyword_set import KeywordEntry, KeywordSet
from .structured_info import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    LanguageQuality,
    Section,
    StructuredInfo,
)

__all__ = [
    "RawDocument",
    "AnalysisRequest",
    "ContactInfo",
    "Section",
    "ExperienceEntry",
    "EducationEntry",
    "LanguageQuality",
    "StructuredInfo",
    "KeywordEntry",
    "KeywordSet",
    "CategoryScore",
    "KeywordMatch",
    "MissingKeyword",
    "KeywordSuggestion",
    "KeywordAnalysis",
    "Suggestion",
    "ATSCompatibility",
    "AggregateScore",
    "Grade",
    "AnalysisResult",
]
