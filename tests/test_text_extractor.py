from io import BytesIO

import pdfplumber
import pytest
from docx import Document

from ats_resume_scorer.cv_pipeline import text_extractor
from ats_resume_scorer.cv_pipeline.text_extractor import (
    extract_text,
    normalize_text,
    resolve_document_type,
    validate_document,
)
from ats_resume_scorer.errors import DecodeError, ValidationError
from ats_resume_scorer.schemas.document import RawDocument

SIZE_MESSAGE = "File size must be less than 5MB"
TYPE_MESSAGE = "Only PDF, DOC, DOCX, and TXT files are supported"


def _docx_bytes(paragraphs, table_rows=()):
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    if table_rows:
        table = doc.add_table(rows=len(table_rows), cols=len(table_rows[0]))
        for r, row in enumerate(table_rows):
            for c, value in enumerate(row):
                table.cell(r, c).text = value
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


class _FakePage:
    def __init__(self, text):
        self._text = text

    def extract_text(self):
        return self._text


class _FakePdf:
    def __init__(self, texts):
        self.pages = [_FakePage(t) for t in texts]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_valid_txt_document_has_no_errors():
    doc = RawDocument(content=b"Jane Doe", filename="resume.txt")
    assert validate_document(doc) == []


def test_oversized_txt_reports_size_only():
    doc = RawDocument(content=b"a" * (6 * 1024 * 1024), filename="resume.txt")
    with pytest.raises(ValidationError) as exc:
        extract_text(doc)
    assert exc.value.errors == [SIZE_MESSAGE]
    assert exc.value.status_code == 400


def test_unsupported_extension_is_rejected():
    doc = RawDocument(content=b"MZ...", filename="resume.exe")
    with pytest.raises(ValidationError) as exc:
        extract_text(doc)
    assert exc.value.errors == [TYPE_MESSAGE]


def test_all_violations_are_reported_together():
    doc = RawDocument(content=b"", filename="resume.exe", size=10 * 1024 * 1024)
    errors = validate_document(doc)
    assert errors == [SIZE_MESSAGE, TYPE_MESSAGE, "File appears to be empty"]
    with pytest.raises(ValidationError) as exc:
        extract_text(doc)
    assert str(exc.value) == ", ".join(errors)


def test_empty_file_is_rejected():
    doc = RawDocument(content=b"", filename="resume.pdf")
    assert validate_document(doc) == ["File appears to be empty"]


def test_type_falls_back_to_mime_when_filename_has_no_extension():
    doc = RawDocument(content=b"Jane Doe", filename="resume", mime_type="text/plain; charset=utf-8")
    assert resolve_document_type(doc) == "txt"
    assert extract_text(doc) == "Jane Doe"


def test_extension_wins_over_mime_type():
    doc = RawDocument(content=b"x", filename="Resume.PDF", mime_type="text/plain")
    assert resolve_document_type(doc) == "pdf"


def test_normalize_text_collapses_whitespace_and_blank_lines():
    raw = "Line one\r\n\r\n\r\n\r\nLine\t two   spaces  \r\nend"
    assert normalize_text(raw) == "Line one\n\nLine two spaces\nend"


def test_normalize_text_composes_unicode():
    assert normalize_text("Cafe\u0301") == "Caf\u00e9"


def test_normalize_empty_text():
    assert normalize_text("") == ""


def test_txt_decoding_drops_bom_and_normalizes():
    doc = RawDocument(content="\ufeffJane Doe\r\n\r\n\r\nSKILLS".encode("utf-8"), filename="cv.txt")
    assert extract_text(doc) == "Jane Doe\n\nSKILLS"


def test_invalid_utf8_txt_raises_decode_error():
    doc = RawDocument(content=b"\xff\xfe\xfa", filename="cv.txt")
    with pytest.raises(DecodeError) as exc:
        extract_text(doc)
    assert exc.value.status_code == 422
    assert exc.value.filename == "cv.txt"


def test_whitespace_only_txt_yields_empty_text():
    doc = RawDocument(content=b"   \n\n  ", filename="cv.txt")
    assert extract_text(doc) == ""


def test_docx_paragraphs_and_tables_are_extracted():
    content = _docx_bytes(
        ["Jane Doe", "SKILLS", "Python, SQL"],
        table_rows=[("Acme Corp", "2020-Present")],
    )
    doc = RawDocument(content=content, filename="resume.docx")
    assert extract_text(doc) == "Jane Doe\nSKILLS\nPython, SQL\nAcme Corp | 2020-Present"


def test_corrupt_docx_raises_decode_error():
    doc = RawDocument(content=b"not a zip archive", filename="resume.docx")
    with pytest.raises(DecodeError):
        extract_text(doc)


def test_corrupt_pdf_raises_decode_error():
    doc = RawDocument(content=b"this is not a pdf", filename="resume.pdf")
    with pytest.raises(DecodeError):
        extract_text(doc)


def test_pdf_pages_are_joined_with_blank_lines(monkeypatch):
    monkeypatch.setattr(
        text_extractor.pdfplumber,
        "open",
        lambda stream: _FakePdf(["Jane Doe\nEngineer", None, "EDUCATION\nBachelor of Science"]),
    )
    doc = RawDocument(content=b"%PDF-1.4 fake", filename="resume.pdf")
    assert extract_text(doc) == "Jane Doe\nEngineer\n\nEDUCATION\nBachelor of Science"


def test_pdf_library_failure_is_wrapped(monkeypatch):
    def broken_open(stream):
        raise RuntimeError("encrypted")

    monkeypatch.setattr(pdfplumber, "open", broken_open)
    doc = RawDocument(content=b"%PDF-1.4", filename="locked.pdf")
    with pytest.raises(DecodeError) as exc:
        extract_text(doc)
    assert isinstance(exc.value.__cause__, RuntimeError)


def test_declared_size_smaller_than_content_is_still_rejected():
    doc = RawDocument(content=b"a" * (6 * 1024 * 1024), filename="resume.txt", size=100)
    assert validate_document(doc) == [SIZE_MESSAGE]
    with pytest.raises(ValidationError) as exc:
        extract_text(doc)
    assert "File size" in str(exc.value)


def test_declared_size_larger_than_content_is_rejected():
    doc = RawDocument(content=b"Jane Doe", filename="resume.txt", size=6 * 1024 * 1024)
    assert validate_document(doc) == [SIZE_MESSAGE]


def test_legacy_binary_doc_gets_a_specific_reason():
    content = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 512
    doc = RawDocument(content=content, filename="resume.doc")
    with pytest.raises(DecodeError) as exc:
        extract_text(doc)
    assert "save the file as .docx" in str(exc.value)
    assert exc.value.status_code == 422


def test_ooxml_saved_as_doc_is_decoded():
    doc = RawDocument(content=_docx_bytes(["Jane Doe", "SKILLS"]), filename="resume.doc")
    assert extract_text(doc) == "Jane Doe\nSKILLS"
