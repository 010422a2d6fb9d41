"""Conversion of model replies into sanitized HTML study notes."""

from .markup import render_notes
from .sanitize import sanitize_html

__all__ = ["render_notes", "sanitize_html"]
