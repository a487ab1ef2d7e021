"""Extract raw text from uploaded resume files (PDF, DOC/DOCX, TXT). In-memory only."""

import re
import unicodedata
from io import BytesIO
from typing import List

import pdfplumber
from docx import Document

from ats_resume_scorer.config import (
    MAX_FILE_SIZE_BYTES,
    MIME_TYPE_EXTENSIONS,
    SUPPORTED_EXTENSIONS,
)
from ats_resume_scorer.errors import DecodeError, ValidationError
from ats_resume_scorer.schemas.document import RawDocument
from ats_resume_scorer.utils.logger import get_logger

logger = get_logger(__name__)

# Compound File header of binary Word 97-2003 documents
OLE2_SIGNATURE = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"
LEGACY_DOC_REASON = "legacy binary .doc is not supported; save the file as .docx"


def _format_size_limit() -> str:
    megabytes = MAX_FILE_SIZE_BYTES / (1024 * 1024)
    return f"{megabytes:g}MB"


def resolve_document_type(document: RawDocument) -> str:
    """
    Document type from the filename extension, or from the declared MIME type
    when the filename has no extension. Returns "" when neither is known.
    """
    if document.extension:
        return document.extension
    mime = (document.mime_type or "").split(";", 1)[0].strip().lower()
    return MIME_TYPE_EXTENSIONS.get(mime, "")


def validate_document(document: RawDocument) -> List[str]:
    """Return every violated upload constraint (empty list when the document is acceptable)."""
    errors: List[str] = []
    if document.byte_size > MAX_FILE_SIZE_BYTES:
        errors.append(f"File size must be less than {_format_size_limit()}")
    if resolve_document_type(document) not in SUPPORTED_EXTENSIONS:
        errors.append("Only PDF, DOC, DOCX, and TXT files are supported")
    if not document.content:
        errors.append("File appears to be empty")
    return errors


def normalize_text(text: str) -> str:
    """
    Normalize decoded text: NFC unicode, LF line endings, tabs to spaces,
    single spaces, at most one blank line between blocks.
    """
    if not text:
        return ""
    t = unicodedata.normalize("NFC", text)
    t = t.replace("\r\n", "\n").replace("\r", "\n")
    t = t.replace("\t", " ")
    t = re.sub(r" {2,}", " ", t)
    t = re.sub(r" +\n", "\n", t)
    t = re.sub(r"\n{3,}", "\n\n", t)
    return t.strip()


def _extract_txt(document: RawDocument) -> str:
    """Decode plain-text uploads as UTF-8 (a leading BOM is dropped)."""
    try:
        return document.content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        logger.warning("TXT decode failed for %s: %s", document.filename, e)
        raise DecodeError(document.filename, "file is not valid UTF-8 text") from e


def _extract_pdf(document: RawDocument) -> str:
    """Extract text from PDF using pdfplumber."""
    try:
        with pdfplumber.open(BytesIO(document.content)) as pdf:
            parts = []
            for page in pdf.pages:
                ptext = page.extract_text()
                if ptext:
                    parts.append(ptext)
            return "\n\n".join(parts)
    except Exception as e:
        logger.exception("PDF extraction failed for %s", document.filename)
        raise DecodeError(document.filename, "PDF could not be parsed") from e


def _extract_docx(document: RawDocument) -> str:
    """Extract text from DOC/DOCX using python-docx (paragraphs, then table cells)."""
    try:
        doc = Document(BytesIO(document.content))
    except Exception as e:
        logger.exception("Word extraction failed for %s", document.filename)
        raise DecodeError(document.filename, "Word document could not be parsed") from e
    parts = [p.text for p in doc.paragraphs if p.text.strip()]
    for table in doc.tables:
        for row in table.rows:
            cells = [c.text.strip() for c in row.cells if c.text.strip()]
            if cells:
                parts.append(" | ".join(dict.fromkeys(cells)))
    return "\n".join(parts)


def _extract_doc(document: RawDocument) -> str:
    """.doc uploads that are really OOXML decode like .docx; binary Word 97-2003 files are refused."""
    if document.content.startswith(OLE2_SIGNATURE):
        logger.warning("Legacy binary .doc rejected: %s", document.filename)
        raise DecodeError(document.filename, LEGACY_DOC_REASON)
    return _extract_docx(document)


_DECODERS = {
    "txt": _extract_txt,
    "pdf": _extract_pdf,
    "doc": _extract_doc,
    "docx": _extract_docx,
}


def extract_text(document: RawDocument) -> str:
    """
    Validate and decode an uploaded resume, returning normalized UTF-8 text.
    Raises ValidationError listing all violated constraints, or DecodeError
    when the format library cannot parse the buffer. Empty text is a valid result.
    """
    errors = validate_document(document)
    if errors:
        logger.warning("Rejected upload %s: %s", document.filename, "; ".join(errors))
        raise ValidationError(errors)

    doc_type = resolve_document_type(document)
    raw = _DECODERS[doc_type](document)
    text = normalize_text(raw)
    logger.info(
        "Extracted %s chars from %s (%s, %s bytes)",
        len(text),
        document.filename,
        doc_type,
        document.byte_size,
    )
    return text
