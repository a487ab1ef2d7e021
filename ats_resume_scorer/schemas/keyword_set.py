"""Keyword reference data keyed by (industry, seniority level)."""

from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

KeywordCategory = Literal["technical", "soft", "methodology", "industry-specific", "certification"]


class KeywordEntry(BaseModel):
    """Expected keyword with its category and relevance weight."""

    model_config = ConfigDict(frozen=True)

    keyword: str = Field(..., min_length=1, description="Keyword as it should appear in a resume")
    category: KeywordCategory = Field(..., description="Keyword category")
    relevance_weight: int = Field(default=3, ge=1, le=5, description="1 (nice to have) .. 5 (essential)")

    @field_validator("keyword")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()


class KeywordSet(BaseModel):
    """Read-only keyword list for one (industry, level) key."""

    model_config = ConfigDict(frozen=True)

    industry: str = Field(..., description="Industry key, 'general' for the universal set")
    level: str = Field(..., description="Seniority key, 'general' for any level")
    keywords: Tuple[KeywordEntry, ...] = Field(default=())

    @field_validator("industry", "level")
    @classmethod
    def _normalize_key(cls, value: str) -> str:
        return value.strip().lower()

    @property
    def key(self) -> Tuple[str, str]:
        return (self.industry, self.level)

    @property
    def categories(self) -> Tuple[str, ...]:
        """Distinct categories present in this set, in first-seen order."""
        seen = []
        for entry in self.keywords:
            if entry.category not in seen:
                seen.append(entry.category)
        return tuple(seen)
