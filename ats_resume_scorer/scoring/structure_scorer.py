"""Section order scoring against the ideal resume layout."""

from typing import List, Sequence

from ats_resume_scorer.cv_pipeline.patterns import IDEAL_SECTION_ORDER
from ats_resume_scorer.schemas.analysis import CategoryScore
from ats_resume_scorer.schemas.structured_info import StructuredInfo
from ats_resume_scorer.utils.helpers import clamp_score

CATEGORY_NAME = "structure"

# Share of the score from positional closeness vs. the experience-before-education bonus
WEIGHT_POSITION = 0.85
ORDER_BONUS = 15
MAX_RECOMMENDATIONS = 3


def positional_score(detected: Sequence[str], ideal: Sequence[str] = IDEAL_SECTION_ORDER) -> float:
    """
    0-100 closeness of the detected order to the ideal order. Each detected section
    earns len(ideal) minus its distance from its ideal position (floored at 0).
    """
    size = len(ideal)
    points = 0
    for index, name in enumerate(detected):
        if name in ideal:
            points += max(0, size - abs(index - ideal.index(name)))
    return points / (size * size) * 100


def experience_before_education(detected: Sequence[str]) -> bool:
    if "experience" not in detected or "education" not in detected:
        return False
    return detected.index("experience") < detected.index("education")


def structure_recommendations(detected: Sequence[str], ideal: Sequence[str] = IDEAL_SECTION_ORDER) -> List[str]:
    recommendations: List[str] = []
    for ideal_index, name in enumerate(ideal):
        if name not in detected:
            recommendations.append(f"Consider adding a {name} section")
        elif abs(detected.index(name) - ideal_index) > 1:
            recommendations.append(f"Consider moving the {name} section to position {ideal_index + 1}")
    return recommendations[:MAX_RECOMMENDATIONS]


def score_structure(info: StructuredInfo, text: str = "") -> CategoryScore:
    """Positional-distance score plus a bonus when experience precedes education."""
    detected = [name for name in info.section_names if name in IDEAL_SECTION_ORDER]
    if not detected:
        return CategoryScore(
            name=CATEGORY_NAME,
            score=0,
            issues=("No standard resume sections detected",),
        )

    bonus = ORDER_BONUS if experience_before_education(detected) else 0
    score = clamp_score(WEIGHT_POSITION * positional_score(detected) + bonus)

    issues = structure_recommendations(detected)
    strengths: List[str] = []
    if bonus:
        strengths.append("Experience is listed before education")
    elif "experience" in detected and "education" in detected:
        issues.append("Place experience before education")
    if detected[0] in ("contact", "summary"):
        strengths.append("Resume opens with contact details or a summary")
    if "skills" in detected:
        strengths.append("Skills clearly listed")
    return CategoryScore(name=CATEGORY_NAME, score=score, issues=tuple(issues), strengths=tuple(strengths))
