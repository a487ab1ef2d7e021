"""
Analysis pipeline: document -> text -> structured info -> category scores -> result.
Pure and synchronous apart from text decoding and keyword-set resolution,
which the async entry point runs off the event loop.
"""

import asyncio
from datetime import datetime, timezone
from typing import Dict, Optional

from ats_resume_scorer.cv_pipeline.structured_extractor import extract_structured_info
from ats_resume_scorer.cv_pipeline.text_extractor import extract_text
from ats_resume_scorer.keywords.corpus import KeywordCorpus, get_default_corpus
from ats_resume_scorer.schemas.analysis import AnalysisResult, CategoryScore
from ats_resume_scorer.schemas.document import AnalysisRequest, RawDocument
from ats_resume_scorer.schemas.keyword_set import KeywordSet
from ats_resume_scorer.scoring.aggregator import DEFAULT_WEIGHTS, ScoringWeights, aggregate
from ats_resume_scorer.scoring.content_scorer import score_content
from ats_resume_scorer.scoring.formatting_scorer import score_formatting
from ats_resume_scorer.scoring.keyword_scorer import score_keywords
from ats_resume_scorer.scoring.structure_scorer import score_structure
from ats_resume_scorer.services.suggestion_service import generate_suggestions
from ats_resume_scorer.utils.logger import get_logger

logger = get_logger(__name__)


def score_text(
    text: str,
    request: AnalysisRequest,
    keyword_set: KeywordSet,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    created_at: Optional[datetime] = None,
) -> AnalysisResult:
    """Score already-extracted text against an already-resolved keyword set. No I/O."""
    text = text or ""
    info = extract_structured_info(text)

    keyword_analysis = score_keywords(info, text, keyword_set, job_title=request.job_title)
    category_scores: Dict[str, CategoryScore] = {
        "keywords": keyword_analysis.category_score,
        "formatting": score_formatting(info, text),
        "content": score_content(info, text),
        "structure": score_structure(info, text),
    }
    aggregate_score = aggregate(category_scores, weights)
    suggestions = generate_suggestions(category_scores, aggregate_score.overall_score)

    return AnalysisResult(
        overall_score=aggregate_score.overall_score,
        grade=aggregate_score.grade,
        status=aggregate_score.status,
        category_scores=category_scores,
        found_keywords=keyword_analysis.found,
        missing_keywords=keyword_analysis.missing,
        keyword_suggestions=keyword_analysis.suggestions,
        keyword_density=keyword_analysis.density,
        suggestions=tuple(suggestions),
        ats_compatibility=aggregate_score.compatibility,
        structured_info=info,
        industry=request.industry,
        level=request.level,
        keyword_set_key=keyword_set.key,
        job_title=request.job_title,
        created_at=created_at or datetime.now(timezone.utc),
    )


def analyze_text(
    text: str,
    request: Optional[AnalysisRequest] = None,
    corpus: Optional[KeywordCorpus] = None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    created_at: Optional[datetime] = None,
) -> AnalysisResult:
    """
    Analyze plain resume text. Raises LookupFallbackExhausted only when the
    keyword corpus has no general fallback.
    """
    request = request or AnalysisRequest()
    corpus = corpus or get_default_corpus()
    keyword_set = corpus.resolve(request.industry, request.level)
    return score_text(text, request, keyword_set, weights, created_at)


def _log_result(document: RawDocument, result: AnalysisResult) -> None:
    logger.info(
        "Analyzed %s: industry=%s level=%s keywords=%s score=%s grade=%s",
        document.filename,
        result.industry,
        result.level,
        result.keyword_set_key,
        result.overall_score,
        result.grade.value,
    )


def analyze_document(
    document: RawDocument,
    request: Optional[AnalysisRequest] = None,
    corpus: Optional[KeywordCorpus] = None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    created_at: Optional[datetime] = None,
) -> AnalysisResult:
    """
    Run the full pipeline on an uploaded document.
    Raises ValidationError or DecodeError from text extraction, and
    LookupFallbackExhausted when the keyword corpus is not seeded.
    """
    text = extract_text(document)
    result = analyze_text(text, request, corpus, weights, created_at)
    _log_result(document, result)
    return result


async def analyze_document_async(
    document: RawDocument,
    request: Optional[AnalysisRequest] = None,
    corpus: Optional[KeywordCorpus] = None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    created_at: Optional[datetime] = None,
) -> AnalysisResult:
    """
    Async twin of analyze_document. Decoding and keyword-set resolution run in
    worker threads and are the only await points; a caller may cancel at any
    of them without side effects.
    """
    request = request or AnalysisRequest()
    text = await asyncio.to_thread(extract_text, document)
    # First call reads the seed file
    corpus = corpus or await asyncio.to_thread(get_default_corpus)
    keyword_set = await asyncio.to_thread(corpus.resolve, request.industry, request.level)
    result = score_text(text, request, keyword_set, weights, created_at)
    _log_result(document, result)
    return result
