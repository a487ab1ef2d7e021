import pytest

from ats_resume_scorer.cv_pipeline.structured_extractor import extract_structured_info
from ats_resume_scorer.schemas.structured_info import LanguageQuality, Section, StructuredInfo
from ats_resume_scorer.scoring.content_scorer import score_content
from ats_resume_scorer.scoring.formatting_scorer import (
    FORMATTING_CHECKS,
    has_clean_characters,
    has_consistent_bullets,
    score_formatting,
)
from ats_resume_scorer.scoring.structure_scorer import (
    experience_before_education,
    positional_score,
    score_structure,
)


def _info_with_sections(*names, **kwargs):
    return StructuredInfo(sections=tuple(Section(name=n, raw_content="") for n in names), **kwargs)


# Formatting


def test_strong_resume_passes_every_formatting_check(strong_resume):
    result = score_formatting(extract_structured_info(strong_resume), strong_resume)
    assert result.score == 100
    assert result.issues == ()
    assert len(result.strengths) == len(FORMATTING_CHECKS)


def test_empty_text_formats_to_zero():
    assert score_formatting(StructuredInfo(), "").score == 0


def test_short_plain_text_fails_most_checks():
    text = "hello world"
    result = score_formatting(extract_structured_info(text), text)
    # only clean characters and clean spacing pass: 2 of 7
    assert result.score == 29
    assert "Missing contact information (email or phone)" in result.issues


def test_mixed_bullet_markers_are_inconsistent():
    assert has_consistent_bullets(StructuredInfo(), "• one\n• two\n• three")
    assert not has_consistent_bullets(StructuredInfo(), "• one\n- two\n* three")
    assert not has_consistent_bullets(StructuredInfo(), "• one\n• two")


def test_unusual_characters_are_flagged():
    assert has_clean_characters(StructuredInfo(), "Plain text • with – typographic “quotes”")
    assert not has_clean_characters(StructuredInfo(), "☃☃☃ snowmen")


def test_tabs_and_blank_runs_fail_spacing_check(strong_resume):
    messy = strong_resume.replace("EDUCATION", "\n\n\nEDUCATION\t")
    result = score_formatting(extract_structured_info(messy), messy)
    assert "Remove extra blank lines and tab characters" in result.issues
    assert result.score < 100


# Content


def test_complete_resume_gets_full_content_score(strong_resume):
    assert score_content(extract_structured_info(strong_resume)).score == 100


def test_missing_summary_costs_a_quarter_of_required_points(end_to_end_resume):
    result = score_content(extract_structured_info(end_to_end_resume))
    # 3 of 4 required (52.5) + no optional + metrics (10)
    assert result.score == 63
    assert "Missing required section: summary" in result.issues


def test_content_without_metrics():
    info = _info_with_sections("summary", "experience")
    result = score_content(info)
    assert result.score == 35
    assert "No quantified achievements (numbers, percentages, amounts)" in result.issues


def test_language_notes_do_not_change_content_score():
    passive = _info_with_sections(
        "experience",
        language_quality=LanguageQuality(action_verb_count=0, passive_phrase_count=4),
    )
    active = _info_with_sections(
        "experience",
        language_quality=LanguageQuality(action_verb_count=6, passive_phrase_count=0),
    )
    assert score_content(passive).score == score_content(active).score
    assert any("Passive phrasing" in i for i in score_content(passive).issues)
    assert any("action verbs" in s for s in score_content(active).strengths)


# Structure


def test_ideal_order_scores_full_marks(strong_resume):
    assert score_structure(extract_structured_info(strong_resume)).score == 100


def test_partial_order_with_experience_first():
    info = _info_with_sections("experience", "education", "skills")
    result = score_structure(info)
    # 0.85 * (15 / 49 * 100) + 15
    assert result.score == 41
    assert "Experience is listed before education" in result.strengths


def test_full_order_with_summary_and_certifications():
    info = _info_with_sections("summary", "experience", "education", "skills", "certifications")
    assert score_structure(info).score == 67


def test_education_before_experience_loses_bonus():
    info = _info_with_sections("education", "experience")
    result = score_structure(info)
    assert result.score == 17
    assert "Place experience before education" in result.issues


def test_no_sections_scores_zero():
    result = score_structure(StructuredInfo())
    assert result.score == 0
    assert result.issues == ("No standard resume sections detected",)


def test_structure_recommendations_are_capped():
    result = score_structure(_info_with_sections("skills"))
    recommendations = [i for i in result.issues if i.startswith("Consider")]
    assert len(recommendations) == 3


@pytest.mark.parametrize(
    "detected, expected",
    [
        (["experience", "education"], True),
        (["education", "experience"], False),
        (["experience"], False),
    ],
)
def test_experience_before_education(detected, expected):
    assert experience_before_education(detected) is expected


def test_positional_score_bounds():
    assert positional_score([]) == 0
    assert positional_score(["contact", "summary", "experience", "education", "skills", "certifications", "projects"]) == 100
