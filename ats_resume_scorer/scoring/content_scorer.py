"""Content completeness: required sections, optional sections, quantified achievements."""

from typing import List

from ats_resume_scorer.cv_pipeline.patterns import OPTIONAL_SECTIONS, REQUIRED_SECTIONS
from ats_resume_scorer.schemas.analysis import CategoryScore
from ats_resume_scorer.schemas.structured_info import StructuredInfo
from ats_resume_scorer.utils.helpers import clamp_score

CATEGORY_NAME = "content"

WEIGHT_REQUIRED = 70
WEIGHT_OPTIONAL = 20
WEIGHT_METRICS = 10

MAX_AVERAGE_SENTENCE_LENGTH = 25


def _section_present(info: StructuredInfo, name: str) -> bool:
    if name == "summary" and info.summary:
        return True
    return info.has_section(name)


def score_content(info: StructuredInfo, text: str = "") -> CategoryScore:
    """
    70 points for required-section coverage, 20 for optional sections,
    10 for at least one quantified metric.
    """
    issues: List[str] = []
    strengths: List[str] = []

    required = [name for name in REQUIRED_SECTIONS if _section_present(info, name)]
    optional = [name for name in OPTIONAL_SECTIONS if _section_present(info, name)]
    has_metrics = bool(info.metrics)

    for name in REQUIRED_SECTIONS:
        if name in required:
            strengths.append(f"{name.capitalize()} section present")
        else:
            issues.append(f"Missing required section: {name}")
    for name in OPTIONAL_SECTIONS:
        if name in optional:
            strengths.append(f"{name.capitalize()} section adds depth")
    if not optional:
        issues.append("Consider adding projects or certifications")
    if has_metrics:
        strengths.append(f"{len(info.metrics)} quantified achievement(s) found")
    else:
        issues.append("No quantified achievements (numbers, percentages, amounts)")

    # Writing-style notes; they do not change the score
    quality = info.language_quality
    if quality.passive_phrase_count > quality.action_verb_count:
        issues.append("Passive phrasing (e.g. 'responsible for') outweighs action verbs")
    elif quality.action_verb_count >= 5:
        strengths.append(f"Strong action verbs used ({quality.action_verb_count})")
    if quality.average_sentence_length > MAX_AVERAGE_SENTENCE_LENGTH:
        issues.append("Sentences are long; keep bullet points concise")

    score = clamp_score(
        WEIGHT_REQUIRED * len(required) / len(REQUIRED_SECTIONS)
        + WEIGHT_OPTIONAL * len(optional) / len(OPTIONAL_SECTIONS)
        + (WEIGHT_METRICS if has_metrics else 0)
    )
    return CategoryScore(name=CATEGORY_NAME, score=score, issues=tuple(issues), strengths=tuple(strengths))
