"""Turn low category scores into a short, prioritized list of suggestions."""

from typing import List, Mapping

from ats_resume_scorer.config import MAX_SUGGESTIONS
from ats_resume_scorer.schemas.analysis import CategoryScore, Suggestion

SUGGESTION_THRESHOLD = 70
CRITICAL_THRESHOLD = 60

PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}

# One suggestion per category that scores below the threshold
CATEGORY_SUGGESTIONS = {
    "keywords": {
        "priority": "high",
        "title": "Add Relevant Keywords",
        "description": "Include more industry-specific keywords in your resume",
    },
    "formatting": {
        "priority": "medium",
        "title": "Improve Resume Formatting",
        "description": "Use consistent formatting and clear section headers",
    },
    "content": {
        "priority": "high",
        "title": "Enhance Content Quality",
        "description": "Add more detailed descriptions and quantifiable achievements",
    },
    "structure": {
        "priority": "medium",
        "title": "Reorganize Resume Structure",
        "description": "Follow standard resume section order for better ATS parsing",
    },
}

CRITICAL_SUGGESTION = Suggestion(
    category="overall",
    priority="high",
    title="Major Improvements Needed",
    description="Your resume needs significant improvements to be ATS-friendly",
)


def generate_suggestions(
    category_scores: Mapping[str, CategoryScore],
    overall_score: int,
    limit: int = MAX_SUGGESTIONS,
) -> List[Suggestion]:
    """
    One templated suggestion per category scoring below 70, plus a critical
    suggestion when the overall score is below 60. Sorted high > medium > low
    (stable, so ties keep generation order) and truncated to `limit`.
    """
    suggestions: List[Suggestion] = []
    for name, category in category_scores.items():
        template = CATEGORY_SUGGESTIONS.get(name)
        if template and category.score < SUGGESTION_THRESHOLD:
            description = template["description"]
            if category.issues:
                description = f"{description}. {category.issues[0]}."
            suggestions.append(
                Suggestion(
                    category=name,
                    priority=template["priority"],
                    title=template["title"],
                    description=description,
                )
            )
    if overall_score < CRITICAL_THRESHOLD:
        suggestions.append(CRITICAL_SUGGESTION)

    suggestions.sort(key=lambda s: PRIORITY_ORDER[s.priority])
    return suggestions[:limit]
