"""Rule-based extraction of structured resume data (sections, contact, skills, metrics) from plain text."""

from typing import Dict, List, Optional, Tuple

from ats_resume_scorer.cv_pipeline.patterns import (
    ACHIEVEMENT_PATTERNS,
    ACTION_VERBS,
    BULLET_MARKERS,
    DATE_RANGE_PATTERN,
    DEGREE_PATTERN,
    EMAIL_PATTERN,
    GPA_PATTERN,
    JOB_TITLE_KEYWORDS,
    LINKEDIN_PATTERN,
    LOCATION_PATTERNS,
    MAX_ACHIEVEMENTS,
    MAX_HEADER_LENGTH,
    MAX_HEADER_WORDS,
    METRIC_PATTERNS,
    MIN_SENTENCE_CHARS,
    NAME_PATTERN,
    NAME_SEARCH_LINES,
    PASSIVE_PHRASES,
    PHONE_PATTERN,
    SECTION_HEADERS,
    SENTENCE_SPLIT_PATTERN,
    SKILL_VOCABULARY,
    YEAR_PATTERN,
)
from ats_resume_scorer.schemas.structured_info import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    LanguageQuality,
    Section,
    StructuredInfo,
)
from ats_resume_scorer.utils.helpers import count_words, dedupe_preserve_order, term_pattern
from ats_resume_scorer.utils.logger import get_logger

logger = get_logger(__name__)

_SKILL_PATTERNS = [
    (skill, term_pattern(skill)) for skills in SKILL_VOCABULARY.values() for skill in skills
]
_JOB_TITLE_PATTERNS = [term_pattern(k) for k in JOB_TITLE_KEYWORDS]
_ACTION_VERB_PATTERNS = [term_pattern(v) for v in ACTION_VERBS]
_PASSIVE_PHRASE_PATTERNS = [term_pattern(p) for p in PASSIVE_PHRASES]


def is_bullet(line: str) -> bool:
    return line.startswith(BULLET_MARKERS)


def strip_bullet(line: str) -> str:
    return line.lstrip("".join(BULLET_MARKERS)).strip()


def match_section_header(line: str) -> Optional[Tuple[str, str]]:
    """
    Classify a line as a section header.
    Returns (section_name, inline_content) or None. "Skills: Python, SQL" yields
    ("skills", "Python, SQL"). Lines that look like content (bullets, pipes,
    digits, long prose) never open a section.
    """
    stripped = line.strip()
    if not stripped or is_bullet(stripped) or "|" in stripped:
        return None
    header_part, _, inline = stripped.partition(":")
    header_part = header_part.strip()
    if len(header_part) > MAX_HEADER_LENGTH or len(header_part.split()) > MAX_HEADER_WORDS:
        return None
    if any(ch.isdigit() for ch in header_part):
        return None
    lower = header_part.lower()
    for name, keywords in SECTION_HEADERS:
        if any(k in lower for k in keywords):
            return name, inline.strip()
    return None


def detect_sections(text: str) -> Tuple[List[Section], str]:
    """
    Split text into sections in document order.
    Returns (sections, preamble) where preamble is the text before the first header.
    """
    sections: List[Section] = []
    preamble: List[str] = []
    current_name: Optional[str] = None
    current_lines: List[str] = []

    for line in (text or "").split("\n"):
        header = match_section_header(line)
        if header:
            if current_name is not None:
                sections.append(Section(name=current_name, raw_content="\n".join(current_lines).strip()))
            current_name, inline = header
            current_lines = [inline] if inline else []
        elif current_name is None:
            preamble.append(line)
        else:
            current_lines.append(line)

    if current_name is not None:
        sections.append(Section(name=current_name, raw_content="\n".join(current_lines).strip()))
    return sections, "\n".join(preamble).strip()


def extract_contact(text: str) -> ContactInfo:
    """First email, phone, location and LinkedIn handle, plus a name from the top lines."""
    email = EMAIL_PATTERN.search(text)
    phone = PHONE_PATTERN.search(text)
    linkedin = LINKEDIN_PATTERN.search(text)
    location = None
    for pattern in LOCATION_PATTERNS:
        m = pattern.search(text)
        if m:
            location = m.group(0)
            break
    return ContactInfo(
        name=extract_name(text),
        email=email.group(0) if email else None,
        phone=phone.group(0).strip() if phone else None,
        location=location,
        linkedin=linkedin.group(0) if linkedin else None,
    )


def extract_name(text: str) -> Optional[str]:
    for line in (text or "").split("\n")[:NAME_SEARCH_LINES]:
        candidate = line.strip()
        if candidate and len(candidate) < 50 and NAME_PATTERN.match(candidate):
            if match_section_header(candidate) is None:
                return candidate
    return None


def extract_summary(sections: List[Section]) -> Optional[str]:
    """First prose block of the first summary section, joined into one line."""
    for section in sections:
        if section.name != "summary":
            continue
        block: List[str] = []
        for line in section.raw_content.split("\n"):
            stripped = line.strip()
            if not stripped:
                if block:
                    break
                continue
            block.append(strip_bullet(stripped) if is_bullet(stripped) else stripped)
        if block:
            return " ".join(block)
    return None


def extract_skills(text: str, sections: List[Section]) -> List[str]:
    """
    Vocabulary skills found in the skills section(s), or in the whole document
    when there is no skills section. Ordered by first occurrence, deduplicated.
    """
    scope = "\n".join(s.raw_content for s in sections if s.name == "skills") or text
    hits: List[Tuple[int, str]] = []
    for skill, pattern in _SKILL_PATTERNS:
        m = pattern.search(scope)
        if m:
            hits.append((m.start(), skill))
    hits.sort(key=lambda h: h[0])
    return dedupe_preserve_order(skill for _, skill in hits)


def extract_metrics(text: str) -> List[str]:
    """
    Non-overlapping numeric/quantifier matches across the document, in text order,
    deduplicated. At the same start the longest match wins; a match starting
    inside one already kept is dropped.
    """
    spans: List[Tuple[int, int, str]] = []
    for pattern in METRIC_PATTERNS:
        for m in pattern.finditer(text or ""):
            spans.append((m.start(), m.end(), m.group(0).strip()))
    spans.sort(key=lambda s: (s[0], -s[1]))

    kept: List[str] = []
    last_end = 0
    for start, end, value in spans:
        if start >= last_end:
            kept.append(value)
            last_end = end
    return dedupe_preserve_order(kept, case_insensitive=False)


def _is_job_header(line: str) -> bool:
    if "|" in line or " at " in line.lower():
        return True
    return any(p.search(line) for p in _JOB_TITLE_PATTERNS)


def _split_job_line(line: str) -> Tuple[str, Optional[str]]:
    """(title, company) from "Title | Company | ..." or "Title at Company"."""
    if "|" in line:
        parts = [p.strip() for p in line.split("|") if p.strip()]
        title = parts[0] if parts else line
        company = parts[1] if len(parts) > 1 else None
        if company and DATE_RANGE_PATTERN.fullmatch(company):
            company = None
        return title, company
    lower = line.lower()
    if " at " in lower:
        idx = lower.index(" at ")
        company = DATE_RANGE_PATTERN.sub("", line[idx + 4:]).strip(" ,-–")
        return line[:idx].strip(), company or None
    return line, None


def extract_experience(sections: List[Section]) -> List[ExperienceEntry]:
    """Job entries from the experience section(s); bullets attach to the preceding header line."""
    entries: List[ExperienceEntry] = []
    current: Optional[Dict] = None

    def flush() -> None:
        if current is not None:
            entries.append(ExperienceEntry(**current))

    for section in sections:
        if section.name != "experience":
            continue
        for line in section.raw_content.split("\n"):
            stripped = line.strip()
            if not stripped:
                continue
            if is_bullet(stripped):
                if current is not None:
                    current["bullets"] = current["bullets"] + (strip_bullet(stripped),)
                continue
            if _is_job_header(stripped):
                flush()
                title, company = _split_job_line(stripped)
                date_match = DATE_RANGE_PATTERN.search(stripped)
                current = {
                    "title": title,
                    "company": company,
                    "date_range": date_match.group(0) if date_match else None,
                    "bullets": (),
                }
    flush()
    return entries


def extract_education(sections: List[Section]) -> List[EducationEntry]:
    """Degree lines from the education section(s), with year and GPA when present."""
    entries: List[Dict] = []
    for section in sections:
        if section.name != "education":
            continue
        for line in section.raw_content.split("\n"):
            stripped = strip_bullet(line.strip())
            if not stripped:
                continue
            gpa = GPA_PATTERN.search(stripped)
            if DEGREE_PATTERN.search(stripped):
                years = YEAR_PATTERN.findall(stripped)
                entries.append(
                    {
                        "degree_line": stripped,
                        "year": years[-1] if years else None,
                        "gpa": gpa.group(1) if gpa else None,
                    }
                )
            elif gpa and entries and entries[-1]["gpa"] is None:
                # GPA often sits on its own line under the degree
                entries[-1]["gpa"] = gpa.group(1)
    return [EducationEntry(**e) for e in entries]


def extract_certifications(sections: List[Section]) -> List[str]:
    lines: List[str] = []
    for section in sections:
        if section.name == "certifications":
            lines.extend(strip_bullet(l.strip()) for l in section.raw_content.split("\n") if l.strip())
    return dedupe_preserve_order(l for l in lines if l)


def extract_projects(sections: List[Section]) -> List[str]:
    """Project names: non-bullet lines of the projects section that are not tech-stack lines."""
    names: List[str] = []
    for section in sections:
        if section.name != "projects":
            continue
        for line in section.raw_content.split("\n"):
            stripped = line.strip()
            if not stripped or is_bullet(stripped) or len(stripped) <= 3:
                continue
            if stripped.lower().startswith(("technologies", "tech stack", "tools")):
                continue
            names.append(stripped)
    return dedupe_preserve_order(names)


def extract_achievements(text: str) -> List[str]:
    found: List[Tuple[int, str]] = []
    for pattern in ACHIEVEMENT_PATTERNS:
        for m in pattern.finditer(text or ""):
            found.append((m.start(), m.group(0).strip()))
    found.sort(key=lambda f: f[0])
    return dedupe_preserve_order(value for _, value in found)[:MAX_ACHIEVEMENTS]


def analyze_language_quality(text: str) -> LanguageQuality:
    """Action-verb and passive-phrase counts, mean sentence length and a simple readability score."""
    text = text or ""
    action = sum(len(p.findall(text)) for p in _ACTION_VERB_PATTERNS)
    passive = sum(len(p.findall(text)) for p in _PASSIVE_PHRASE_PATTERNS)

    sentences = [s for s in SENTENCE_SPLIT_PATTERN.split(text) if len(s.strip()) > MIN_SENTENCE_CHARS]
    avg_sentence = sum(count_words(s) for s in sentences) / len(sentences) if sentences else 0.0

    words = text.split()
    readability = 0.0
    if words and sentences:
        avg_chars = sum(len(w) for w in words) / len(words)
        readability = max(0.0, min(100.0, 100 - avg_sentence * 2 - avg_chars * 3))

    return LanguageQuality(
        action_verb_count=action,
        passive_phrase_count=passive,
        average_sentence_length=round(avg_sentence, 1),
        readability_score=round(readability, 1),
        strong_language_ratio=round(action / (action + passive + 1), 3),
    )


def extract_structured_info(text: str) -> StructuredInfo:
    """
    Build StructuredInfo from normalized resume text. Never raises: text with
    no recognizable content yields empty sections and absent optional fields.
    """
    text = text or ""
    sections, preamble = detect_sections(text)
    contact = extract_contact(text)

    # Contact details above the first header form an implicit contact section
    if preamble and not any(s.name == "contact" for s in sections):
        if EMAIL_PATTERN.search(preamble) or PHONE_PATTERN.search(preamble):
            sections.insert(0, Section(name="contact", raw_content=preamble))

    info = StructuredInfo(
        contact=contact,
        summary=extract_summary(sections),
        sections=tuple(sections),
        skills=tuple(extract_skills(text, sections)),
        experience_entries=tuple(extract_experience(sections)),
        education_entries=tuple(extract_education(sections)),
        certifications=tuple(extract_certifications(sections)),
        projects=tuple(extract_projects(sections)),
        achievements=tuple(extract_achievements(text)),
        metrics=tuple(extract_metrics(text)),
        language_quality=analyze_language_quality(text),
        word_count=count_words(text),
    )
    logger.debug(
        "Structured info: sections=%s skills=%s metrics=%s",
        info.section_names,
        len(info.skills),
        len(info.metrics),
    )
    return info
