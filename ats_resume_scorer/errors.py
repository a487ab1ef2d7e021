"""Error taxonomy for the analysis pipeline.

Only text extraction and keyword-corpus resolution can fail. Structured
extraction and scoring always produce a (possibly degraded) result.
"""

from typing import List, Optional


class ATSScorerError(Exception):
    """Base class for every error raised by the scorer."""

    status_code: int = 500
    user_message: str = "Resume analysis failed."


class ExtractionError(ATSScorerError):
    """Raised when an uploaded document cannot be turned into text."""


class ValidationError(ExtractionError):
    """Uploaded document violates one or more upload constraints.

    ``errors`` lists every violated constraint, not just the first one.
    """

    status_code = 400

    def __init__(self, errors: List[str]) -> None:
        self.errors = list(errors)
        super().__init__(", ".join(self.errors))

    @property
    def user_message(self) -> str:  # type: ignore[override]
        return str(self)


class DecodeError(ExtractionError):
    """Format library could not parse a nominally well-typed buffer."""

    status_code = 422
    user_message = "Could not read file. It may be corrupted or password protected."

    def __init__(self, filename: str, reason: str = "") -> None:
        self.filename = filename
        message = f"Could not read {filename or 'document'}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class LookupFallbackExhausted(ATSScorerError):
    """No keyword set found even for the ("general", "general") default.

    Means the reference corpus was never seeded; this is an internal error,
    not something the uploader can fix.
    """

    status_code = 500

    def __init__(self, industry: str, level: str) -> None:
        self.industry = industry
        self.level = level
        super().__init__(
            f"No keyword set for ({industry!r}, {level!r}) and no general fallback; "
            "keyword corpus is not seeded"
        )


class KeywordSeedError(ATSScorerError):
    """Keyword seed data is missing or does not match the KeywordSet schema."""

    def __init__(self, source: str, reason: Optional[str] = None) -> None:
        self.source = source
        super().__init__(f"Invalid keyword seed data in {source}" + (f": {reason}" if reason else ""))
