"""Resume pipeline: text extraction (PDF/DOCX/TXT), normalization, rule-based structured extraction."""

from ats_resume_scorer.cv_pipeline.structured_extractor import extract_structured_info
from ats_resume_scorer.cv_pipeline.text_extractor import extract_text, normalize_text, validate_document

__all__ = ["extract_text", "normalize_text", "validate_document", "extract_structured_info"]
