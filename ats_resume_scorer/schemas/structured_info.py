"""Structured resume data recovered from plain text by pattern rules."""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ContactInfo(BaseModel):
    """Contact fields; each is the first match of its pattern, or None."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(default=None, description="Candidate name from the top lines")
    email: Optional[str] = Field(default=None, description="First email address")
    phone: Optional[str] = Field(default=None, description="First phone number")
    location: Optional[str] = Field(default=None, description="First 'City, ST' or ZIP match")
    linkedin: Optional[str] = Field(default=None, description="LinkedIn profile path")

    @property
    def has_contact_block(self) -> bool:
        return bool(self.email or self.phone)


class Section(BaseModel):
    """A detected resume section; order in StructuredInfo.sections follows the document."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Canonical section name (summary, experience, ...)")
    raw_content: str = Field(default="", description="Lines between this header and the next")


class ExperienceEntry(BaseModel):
    """One job entry from the experience section."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Job title line (first pipe-separated part)")
    company: Optional[str] = Field(default=None, description="Company, if separable from the title line")
    date_range: Optional[str] = Field(default=None, description="Date range found on the title line")
    bullets: Tuple[str, ...] = Field(default=(), description="Bullet lines without the marker")


class EducationEntry(BaseModel):
    """One degree line from the education section."""

    model_config = ConfigDict(frozen=True)

    degree_line: str = Field(..., description="Full degree line")
    year: Optional[str] = Field(default=None, description="Last four-digit year on the line")
    gpa: Optional[str] = Field(default=None, description="GPA on the degree line or the lines right after it")


class LanguageQuality(BaseModel):
    """Writing-style signals over the whole document."""

    model_config = ConfigDict(frozen=True)

    action_verb_count: int = 0
    passive_phrase_count: int = 0
    average_sentence_length: float = 0.0
    readability_score: float = 0.0
    strong_language_ratio: float = 0.0


class StructuredInfo(BaseModel):
    """
    Everything the scorers need, derived purely from the extracted text.
    Never patched after construction; re-run extraction to get a new one.
    """

    model_config = ConfigDict(frozen=True)

    contact: ContactInfo = Field(default_factory=ContactInfo)
    summary: Optional[str] = None
    sections: Tuple[Section, ...] = ()
    skills: Tuple[str, ...] = ()
    experience_entries: Tuple[ExperienceEntry, ...] = ()
    education_entries: Tuple[EducationEntry, ...] = ()
    certifications: Tuple[str, ...] = ()
    projects: Tuple[str, ...] = ()
    achievements: Tuple[str, ...] = ()
    metrics: Tuple[str, ...] = ()
    language_quality: LanguageQuality = Field(default_factory=LanguageQuality)
    word_count: int = 0

    @property
    def section_names(self) -> List[str]:
        """Distinct section names in first-occurrence order."""
        names: List[str] = []
        for section in self.sections:
            if section.name not in names:
                names.append(section.name)
        return names

    def has_section(self, name: str) -> bool:
        return any(s.name == name for s in self.sections)
