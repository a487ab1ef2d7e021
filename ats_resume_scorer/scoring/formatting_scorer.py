"""ATS-friendly formatting checklist."""

from typing import Callable, List, Tuple

from ats_resume_scorer.config import IDEAL_MAX_CHARS, IDEAL_MIN_CHARS
from ats_resume_scorer.cv_pipeline.patterns import BULLET_MARKERS
from ats_resume_scorer.schemas.analysis import CategoryScore
from ats_resume_scorer.schemas.structured_info import StructuredInfo
from ats_resume_scorer.utils.helpers import clamp_score

CATEGORY_NAME = "formatting"

MIN_RECOGNIZED_SECTIONS = 3
MIN_BULLET_LINES = 3
# Share of characters that may be non-ASCII or control before ATS parsing is at risk
MAX_UNUSUAL_CHAR_RATIO = 0.02
# Typographic characters ATS parsers handle fine
ALLOWED_NON_ASCII = frozenset("•▪◦‣●–—‘’“”…é")


def has_contact_block(info: StructuredInfo, text: str) -> bool:
    return info.contact.has_contact_block


def has_enough_sections(info: StructuredInfo, text: str) -> bool:
    recognized = [name for name in info.section_names if name != "contact"]
    return len(recognized) >= MIN_RECOGNIZED_SECTIONS


def has_clean_characters(info: StructuredInfo, text: str) -> bool:
    if not text:
        return True
    unusual = sum(
        1
        for ch in text
        if (ord(ch) > 127 and ch not in ALLOWED_NON_ASCII) or (ord(ch) < 32 and ch != "\n")
    )
    return unusual / len(text) <= MAX_UNUSUAL_CHAR_RATIO


def has_line_breaks(info: StructuredInfo, text: str) -> bool:
    return "\n" in text


def has_appropriate_length(info: StructuredInfo, text: str) -> bool:
    return IDEAL_MIN_CHARS <= len(text) <= IDEAL_MAX_CHARS


def has_consistent_bullets(info: StructuredInfo, text: str) -> bool:
    """At least a few bullet lines, all using the same marker."""
    markers = [
        line.strip()[0]
        for line in text.split("\n")
        if line.strip() and line.strip().startswith(BULLET_MARKERS)
    ]
    return len(markers) >= MIN_BULLET_LINES and len(set(markers)) == 1


def has_no_spacing_leftovers(info: StructuredInfo, text: str) -> bool:
    return "\n\n\n" not in text and "\t" not in text


Check = Tuple[Callable[[StructuredInfo, str], bool], str, str]

# (check, strength when passed, issue when failed)
FORMATTING_CHECKS: Tuple[Check, ...] = (
    (has_contact_block, "Contact information is easy to find", "Missing contact information (email or phone)"),
    (has_enough_sections, "Clear, recognizable section headers", "Fewer than 3 recognizable section headers"),
    (has_clean_characters, "Plain characters that ATS parsers read reliably", "Unusual symbols or control characters may confuse ATS parsers"),
    (has_line_breaks, "Content is broken into lines", "Text has no line breaks; ATS cannot separate sections"),
    (has_appropriate_length, "Resume length is appropriate", f"Resume length should be between {IDEAL_MIN_CHARS} and {IDEAL_MAX_CHARS} characters"),
    (has_consistent_bullets, "Consistent bullet points", "Use a single bullet style for at least three achievement lines"),
    (has_no_spacing_leftovers, "Clean spacing", "Remove extra blank lines and tab characters"),
)


def score_formatting(info: StructuredInfo, text: str) -> CategoryScore:
    """Score = passed checks / total checks. Empty text scores 0."""
    text = text or ""
    if not text.strip():
        return CategoryScore(name=CATEGORY_NAME, score=0, issues=("No readable text found in the document",))

    issues: List[str] = []
    strengths: List[str] = []
    for check, strength, issue in FORMATTING_CHECKS:
        if check(info, text):
            strengths.append(strength)
        else:
            issues.append(issue)
    score = clamp_score(100 * len(strengths) / len(FORMATTING_CHECKS))
    return CategoryScore(name=CATEGORY_NAME, score=score, issues=tuple(issues), strengths=tuple(strengths))
