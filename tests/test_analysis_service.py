import asyncio

import pytest

from ats_resume_scorer import (
    AnalysisRequest,
    RawDocument,
    analyze_document,
    analyze_document_async,
    analyze_text,
)
from ats_resume_scorer.errors import LookupFallbackExhausted, ValidationError
from ats_resume_scorer.keywords.corpus import InMemoryKeywordRepository, KeywordCorpus
from ats_resume_scorer.schemas.analysis import Grade
from ats_resume_scorer.scoring.aggregator import grade_for

from .conftest import make_keyword_set


def _txt(text, filename="resume.txt"):
    return RawDocument(content=text.encode("utf-8"), filename=filename, mime_type="text/plain")


def test_end_to_end_text_resume(end_to_end_resume, fixed_time):
    result = analyze_document(_txt(end_to_end_resume), AnalysisRequest(industry="technology", level="mid"), created_at=fixed_time)
    info = result.structured_info
    assert info.contact.email == "jane.doe@example.com"
    assert {"JavaScript", "Python", "AWS"} <= set(info.skills)
    assert any("20%" in m for m in info.metrics)
    assert result.category_scores["content"].score > 0
    assert result.grade is grade_for(result.overall_score)
    assert 0 <= result.overall_score <= 100
    assert result.keyword_set_key == ("technology", "mid")
    assert result.created_at == fixed_time


def test_strong_resume_is_ats_friendly(strong_resume, small_corpus, fixed_time):
    result = analyze_text(strong_resume, corpus=small_corpus, created_at=fixed_time)
    assert result.category_scores["formatting"].score == 100
    assert result.category_scores["content"].score == 100
    assert result.category_scores["structure"].score == 100
    assert result.status == "ATS-Friendly"
    assert result.grade.rank >= Grade.B.rank
    assert result.ats_compatibility.score == result.overall_score


def test_minimal_text_scores_low(small_corpus, fixed_time):
    result = analyze_text("hello world", corpus=small_corpus, created_at=fixed_time)
    # 0.25 * formatting (2 of 7 checks); every other category is 0
    assert result.overall_score == 7
    assert result.grade is Grade.F
    assert result.status == "Needs Improvement"
    assert [s.category for s in result.suggestions] == [
        "keywords",
        "content",
        "overall",
        "formatting",
        "structure",
    ]


def test_analysis_is_deterministic(strong_resume, fixed_time):
    first = analyze_document(_txt(strong_resume), created_at=fixed_time)
    second = analyze_document(_txt(strong_resume), created_at=fixed_time)
    assert first.model_dump_json() == second.model_dump_json()


def test_result_bounds(strong_resume, end_to_end_resume, fixed_time):
    for text in (strong_resume, end_to_end_resume, "", "hello world"):
        result = analyze_text(text, created_at=fixed_time)
        assert 0 <= result.overall_score <= 100
        assert all(0 <= c.score <= 100 for c in result.category_scores.values())
        assert len(result.missing_keywords) <= 10
        assert len(result.suggestions) <= 8


def test_empty_text_still_produces_a_result(fixed_time):
    result = analyze_text("", created_at=fixed_time)
    assert result.category_scores["formatting"].score == 0
    assert result.category_scores["structure"].score == 0
    assert result.overall_score == 0


def test_unknown_industry_falls_back_to_general(end_to_end_resume, small_corpus, fixed_time):
    request = AnalysisRequest(industry="Aerospace", level="Senior")
    result = analyze_text(end_to_end_resume, request, corpus=small_corpus, created_at=fixed_time)
    assert result.keyword_set_key == ("general", "general")
    assert (result.industry, result.level) == ("aerospace", "senior")


def test_unseeded_corpus_raises(end_to_end_resume):
    corpus = KeywordCorpus(InMemoryKeywordRepository([make_keyword_set("technology", "mid", ("Python", "technical", 5))]))
    with pytest.raises(LookupFallbackExhausted):
        analyze_text(end_to_end_resume, AnalysisRequest(industry="finance", level="entry"), corpus=corpus)


def test_invalid_upload_raises_before_scoring():
    with pytest.raises(ValidationError):
        analyze_document(RawDocument(content=b"", filename="resume.exe"))


def test_job_title_is_carried_through(end_to_end_resume, fixed_time):
    request = AnalysisRequest(job_title="  Software Engineer ")
    result = analyze_text(end_to_end_resume, request, created_at=fixed_time)
    assert result.job_title == "Software Engineer"
    assert any("Software Engineer" in s for s in result.category_scores["keywords"].strengths)


def test_async_entry_point_matches_sync(end_to_end_resume, fixed_time):
    document = _txt(end_to_end_resume)
    sync_result = analyze_document(document, created_at=fixed_time)
    async_result = asyncio.run(analyze_document_async(document, created_at=fixed_time))
    assert async_result == sync_result


def test_async_entry_point_propagates_validation_errors():
    with pytest.raises(ValidationError):
        asyncio.run(analyze_document_async(RawDocument(content=b"", filename="resume.txt")))
