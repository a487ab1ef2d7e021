"""Keyword relevance scoring against the resolved KeywordSet."""

from collections import OrderedDict
from typing import Dict, List, Optional

from ats_resume_scorer.config import MAX_KEYWORD_SUGGESTIONS, MAX_MISSING_KEYWORDS
from ats_resume_scorer.cv_pipeline.patterns import KEYWORD_CONTEXT_WINDOW, KEYWORD_CONTEXT_WORDS
from ats_resume_scorer.schemas.analysis import (
    CategoryScore,
    KeywordAnalysis,
    KeywordMatch,
    KeywordSuggestion,
    MissingKeyword,
)
from ats_resume_scorer.schemas.keyword_set import KeywordSet
from ats_resume_scorer.schemas.structured_info import StructuredInfo
from ats_resume_scorer.utils.helpers import clamp_score, count_words, term_pattern

CATEGORY_NAME = "keywords"

# Sub-score weights
WEIGHT_MATCH_RATE = 0.4
WEIGHT_DENSITY = 0.3
WEIGHT_VARIETY = 0.2
WEIGHT_CONTEXT = 0.1

CONTEXT_POINTS_PER_KEYWORD = 10

KEYWORD_IMPORTANCE = {
    "technical": "high",
    "industry-specific": "high",
    "soft": "medium",
    "methodology": "medium",
    "certification": "low",
}

KEYWORD_PLACEMENT = {
    "technical": "Include in Technical Skills section or project descriptions",
    "industry-specific": "Mention in Professional Summary or relevant experience",
    "soft": "Integrate into Professional Summary or experience descriptions",
    "methodology": "Describe how you applied it in your experience bullets",
    "certification": "List it in a Certifications section",
}

MISSING_KEYWORD_TEMPLATES = {
    "technical": 'Consider adding "{keyword}" to your Technical Skills section',
    "industry-specific": 'Mention "{keyword}" in your Professional Summary',
    "soft": 'Include "{keyword}" in your experience descriptions',
    "methodology": 'Show where you used "{keyword}" in your experience',
    "certification": 'Add "{keyword}" if you hold it',
}


def _keyword_context(text: str, start: int, end: int) -> str:
    lo = max(0, start - KEYWORD_CONTEXT_WINDOW)
    hi = min(len(text), end + KEYWORD_CONTEXT_WINDOW)
    return text[lo:hi].replace("\n", " ").strip()


def _context_score(found: List[KeywordMatch]) -> int:
    """10 points per keyword whose surrounding text mentions experience/skill/proficient, capped at 100."""
    points = 0
    for match in found:
        context = match.context.lower()
        if any(word in context for word in KEYWORD_CONTEXT_WORDS):
            points += CONTEXT_POINTS_PER_KEYWORD
    return min(points, 100)


def _keyword_suggestions(missing: List[MissingKeyword], industry: str) -> List[KeywordSuggestion]:
    return [
        KeywordSuggestion(
            keyword=m.keyword,
            reason=f"Important {m.category} keyword for the {industry} industry",
            placement=KEYWORD_PLACEMENT.get(m.category, "Include in relevant sections"),
        )
        for m in missing
        if m.importance == "high"
    ][:MAX_KEYWORD_SUGGESTIONS]


def score_keywords(
    info: StructuredInfo,
    text: str,
    keyword_set: KeywordSet,
    job_title: Optional[str] = None,
) -> KeywordAnalysis:
    """
    Score keyword coverage: 40% match rate, 30% density, 20% category variety,
    10% context. Missing keywords are ordered by relevance weight and capped.
    """
    text = text or ""
    found: List[KeywordMatch] = []
    missing: List[MissingKeyword] = []
    total_matches = 0

    for entry in keyword_set.keywords:
        matches = list(term_pattern(entry.keyword).finditer(text))
        importance = KEYWORD_IMPORTANCE.get(entry.category, "medium")
        if matches:
            total_matches += len(matches)
            first = matches[0]
            found.append(
                KeywordMatch(
                    keyword=entry.keyword,
                    category=entry.category,
                    relevance_weight=entry.relevance_weight,
                    frequency=len(matches),
                    importance=importance,
                    context=_keyword_context(text, first.start(), first.end()),
                )
            )
        else:
            template = MISSING_KEYWORD_TEMPLATES.get(entry.category, 'Include "{keyword}" in your resume')
            missing.append(
                MissingKeyword(
                    keyword=entry.keyword,
                    category=entry.category,
                    relevance_weight=entry.relevance_weight,
                    importance=importance,
                    suggestion=template.format(keyword=entry.keyword),
                )
            )

    total = len(found) + len(missing)
    word_count = info.word_count or count_words(text)
    match_rate = len(found) / total if total else 0.0
    density_score = min(total_matches / word_count * 1000, 100.0) if word_count else 0.0
    categories = keyword_set.categories
    found_categories = {m.category for m in found}
    variety_score = len(found_categories) / len(categories) * 100 if categories else 0.0
    context_score = _context_score(found)

    score = clamp_score(
        100
        * (
            WEIGHT_MATCH_RATE * match_rate
            + WEIGHT_DENSITY * density_score / 100
            + WEIGHT_VARIETY * variety_score / 100
            + WEIGHT_CONTEXT * context_score / 100
        )
    )

    # Stable sorts keep corpus order among ties
    found.sort(key=lambda m: -m.frequency)
    missing.sort(key=lambda m: -m.relevance_weight)

    issues: List[str] = []
    strengths: List[str] = []
    if total:
        if match_rate < 0.5:
            issues.append(f"Only {len(found)} of {total} expected keywords found")
        else:
            strengths.append(f"{len(found)} of {total} expected keywords found")

    by_category: Dict[str, List[str]] = OrderedDict()
    for m in found:
        by_category.setdefault(m.category, []).append(m.keyword)
    for category, keywords in by_category.items():
        if len(keywords) >= 3:
            strengths.append(f"Strong {category} keyword presence ({len(keywords)} keywords)")
    gaps: Dict[str, List[str]] = OrderedDict()
    for m in missing:
        gaps.setdefault(m.category, []).append(m.keyword)
    for category, keywords in gaps.items():
        if len(keywords) >= 2:
            issues.append(f"Missing {category} keywords: {', '.join(keywords[:3])}")

    if word_count and density_score < 20:
        issues.append("Keyword density is low; expected keywords appear rarely")

    if job_title:
        if term_pattern(job_title).search(text):
            strengths.append(f'Target job title "{job_title}" appears in the resume')
        else:
            issues.append(f'Target job title "{job_title}" does not appear in the resume')

    density = round(total_matches / word_count * 100, 2) if word_count else 0.0
    return KeywordAnalysis(
        category_score=CategoryScore(
            name=CATEGORY_NAME,
            score=score,
            issues=tuple(issues),
            strengths=tuple(strengths),
        ),
        found=tuple(found),
        missing=tuple(missing[:MAX_MISSING_KEYWORDS]),
        total_matches=total_matches,
        density=density,
        suggestions=tuple(_keyword_suggestions(missing, keyword_set.industry)),
    )
