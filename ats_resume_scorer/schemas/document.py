"""Upload-boundary schemas: the raw uploaded document and request parameters."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ats_resume_scorer.config import DEFAULT_INDUSTRY, DEFAULT_LEVEL


class RawDocument(BaseModel):
    """Uploaded file as received from the HTTP layer. Discarded after text extraction."""

    model_config = ConfigDict(frozen=True)

    content: bytes = Field(default=b"", description="Raw file bytes")
    filename: str = Field(default="", description="Original filename as uploaded")
    mime_type: str = Field(default="", description="Declared MIME type")
    size: Optional[int] = Field(default=None, ge=0, description="Size in bytes as declared by the upload layer")

    @property
    def byte_size(self) -> int:
        """Measured buffer length, or the declared size when that is larger."""
        return max(self.size or 0, len(self.content))

    @property
    def extension(self) -> str:
        """Lower-case filename extension without the dot, or "" if none."""
        name = (self.filename or "").strip().lower()
        if "." not in name:
            return ""
        return name.rsplit(".", 1)[1]


class AnalysisRequest(BaseModel):
    """Request parameters accompanying an upload."""

    model_config = ConfigDict(frozen=True)

    industry: str = Field(default=DEFAULT_INDUSTRY, description="Target industry (e.g. technology, finance)")
    level: str = Field(default=DEFAULT_LEVEL, description="Seniority level (entry, mid, senior, executive, general)")
    job_title: Optional[str] = Field(default=None, description="Optional target job title")

    @field_validator("industry", "level", mode="before")
    @classmethod
    def _normalize_key(cls, value: Optional[str]) -> str:
        return (value or "").strip().lower()

    @field_validator("job_title", mode="before")
    @classmethod
    def _blank_title_is_none(cls, value: Optional[str]) -> Optional[str]:
        value = (value or "").strip()
        return value or None
