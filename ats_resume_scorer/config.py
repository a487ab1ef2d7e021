"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# Upload validation
MAX_FILE_SIZE_BYTES: int = int(float(os.getenv("ATS_MAX_FILE_SIZE_MB", "5")) * 1024 * 1024)
SUPPORTED_EXTENSIONS: tuple = ("pdf", "doc", "docx", "txt")

# Declared MIME type -> extension, used when the filename carries no extension
MIME_TYPE_EXTENSIONS: dict = {
    "application/pdf": "pdf",
    "application/msword": "doc",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
    "text/plain": "txt",
}

# Scoring
PASSING_SCORE: int = int(os.getenv("ATS_PASSING_SCORE", "70"))
CATEGORY_WEIGHTS: dict = {
    "keywords": 0.30,
    "formatting": 0.25,
    "content": 0.25,
    "structure": 0.20,
}
MAX_SUGGESTIONS: int = 8
MAX_MISSING_KEYWORDS: int = 10
MAX_KEYWORD_SUGGESTIONS: int = 5

# Document length window for the formatting checklist (characters)
IDEAL_MIN_CHARS: int = 500
IDEAL_MAX_CHARS: int = 5000

# Keyword corpus
KEYWORD_SEED_PATH: Path = Path(
    os.getenv("ATS_KEYWORD_SEED_PATH", str(_base / "keywords" / "seed_keywords.json"))
)
GENERAL_KEY: str = "general"
DEFAULT_INDUSTRY: str = "technology"
DEFAULT_LEVEL: str = "mid"

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
