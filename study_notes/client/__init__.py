"""Client side of the study notes flow: PDF text extraction and the upload session."""

from .extraction import extract_text
from .session import NotesSession, SessionState

__all__ = ["extract_text", "NotesSession", "SessionState"]
