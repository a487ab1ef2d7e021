"""ATS resume scorer: extract resume text, recover its structure and score it against an ATS rubric."""

from ats_resume_scorer.errors import (
    ATSScorerError,
    DecodeError,
    ExtractionError,
    KeywordSeedError,
    LookupFallbackExhausted,
    ValidationError,
)
from ats_resume_scorer.schemas import AnalysisRequest, AnalysisResult, RawDocument
from ats_resume_scorer.services import analyze_document, analyze_document_async, analyze_text

__all__ = [
    "analyze_document",
    "analyze_document_async",
    "analyze_text",
    "RawDocument",
    "AnalysisRequest",
    "AnalysisResult",
    "ATSScorerError",
    "ExtractionError",
    "ValidationError",
    "DecodeError",
    "LookupFallbackExhausted",
    "KeywordSeedError",
]
