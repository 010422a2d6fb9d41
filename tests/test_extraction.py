from __future__ import annotations

import pytest

from study_notes.client import extraction
from study_notes.client.extraction import extract_text
from study_notes.errors import ExtractionFailed


class _FakePage:
    def __init__(self, text):
        self._text = text

    def extract_text(self):
        return self._text


class _FakeReader:
    pages = [_FakePage("Page one\x00"), _FakePage(None), _FakePage("Page two\x07  ")]

    def __init__(self, stream):
        self.stream = stream


def test_extract_text_joins_pages_and_removes_control_chars(monkeypatch):
    monkeypatch.setattr(extraction.PyPDF2, "PdfReader", _FakeReader)

    assert extract_text(b"%PDF-1.4 fake") == "Page one \n\nPage two"


def test_extract_text_accepts_paths(monkeypatch, tmp_path):
    monkeypatch.setattr(extraction.PyPDF2, "PdfReader", _FakeReader)

    assert extract_text(tmp_path / "doc.pdf").startswith("Page one")


def test_extract_text_rejects_invalid_pdf_bytes():
    with pytest.raises(ExtractionFailed, match="Error extracting PDF"):
        extract_text(b"this is not a pdf")


def test_extract_text_rejects_missing_file(tmp_path):
    with pytest.raises(ExtractionFailed):
        extract_text(tmp_path / "missing.pdf")
