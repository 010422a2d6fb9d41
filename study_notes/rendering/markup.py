"""Heuristic markdown-to-HTML transform for model replies.

Models are asked for ``**bold**`` keywords and ``*``/``-`` bullet lines. The
substitutions below are applied independently and are not a markdown parser:
nested structures and mixed paragraphs/lists can come out imperfectly nested.
Sanitization afterwards guarantees the result is safe to display.
"""

from __future__ import annotations

import re

from .sanitize import sanitize_html


_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
_BULLET_RE = re.compile(r"^\s*[\*-]\s*(.*)", re.MULTILINE)
_PARAGRAPH_BREAK = "\n\n"


def to_markup(summary: str) -> str:
    """Apply the substitutions and pick the outer container (unsanitized)."""
    html = _BOLD_RE.sub(r"<strong>\1</strong>", summary)
    html = _BULLET_RE.sub(r"<li>\1</li>", html)
    html = html.replace(_PARAGRAPH_BREAK, "</p><p>")
    if "<li>" in html:
        return f"<ul>{html}</ul>"
    return f"<p>{html}</p>"


def render_notes(summary: str) -> str:
    if not summary:
        return ""
    return sanitize_html(to_markup(summary))
