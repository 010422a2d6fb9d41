from __future__ import annotations

import io
import re
from pathlib import Path
from typing import Union

import PyPDF2

from study_notes.errors import ExtractionFailed


_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")

PdfSource = Union[str, Path, bytes]


def extract_text(source: PdfSource) -> str:
    """Extract plain text from a PDF given as a path or raw bytes.

    Pages are joined with newlines and control characters are replaced by
    spaces. A PDF without a text layer yields ``""``.

    Raises:
        ExtractionFailed: if the file cannot be read or parsed.
    """
    try:
        if isinstance(source, bytes):
            reader = PyPDF2.PdfReader(io.BytesIO(source))
        else:
            reader = PyPDF2.PdfReader(str(source))
        pages = [page.extract_text() or "" for page in reader.pages]
    except Exception as e:
        raise ExtractionFailed(f"Error extracting PDF: {e}") from e

    text = "\n".join(pages)
    return _CONTROL_CHARS_RE.sub(" ", text).strip()
