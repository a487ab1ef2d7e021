"""Service exports."""

from .analysis_service import analyze_document, analyze_document_async, analyze_text, score_text
from .suggestion_service import generate_suggestions

__all__ = [
    "analyze_document",
    "analyze_document_async",
    "analyze_text",
    "score_text",
    "generate_suggestions",
]
