"""Upload/render session for one PDF at a time.

``NotesSession`` walks ``IDLE -> EXTRACTING -> REQUESTING -> SUCCEEDED | FAILED``.
The state is a single enum so a session is never both loading and failed.
Progress text (``step``) is for display only.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional

import httpx

from study_notes.errors import ClientError, RequestFailed
from study_notes.rendering import render_notes

from .extraction import extract_text


logger = logging.getLogger(__name__)

STEP_EXTRACTING = "Extracting text from PDF…"
STEP_REQUESTING = "Sending text to API…"
STEP_SUCCEEDED = "Summary received!"
STEP_FAILED = "Failed"


class SessionState(str, Enum):
    IDLE = "idle"
    EXTRACTING = "extracting"
    REQUESTING = "requesting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


_BUSY_STATES = frozenset({SessionState.EXTRACTING, SessionState.REQUESTING})


class NotesSession:
    """Drives extraction, the gateway call and rendering for a selected PDF.

    Attributes:
        gateway_url: URL of the gateway's summarize route.
        state:       Current ``SessionState``.
        step:        Progress text for the current state.
        error:       Message of the last failure, ``""`` otherwise.
        summary:     Plain-text notes from the last successful submission.
    """

    def __init__(
        self,
        gateway_url: str,
        *,
        http_client: Optional[httpx.Client] = None,
        extractor: Callable[[Path], str] = extract_text,
    ) -> None:
        self.gateway_url = gateway_url
        self._http = http_client or httpx.Client(timeout=None)
        self._extractor = extractor

        self.file: Optional[Path] = None
        self.state = SessionState.IDLE
        self.step = ""
        self.error = ""
        self.summary = ""

    @property
    def rendered(self) -> str:
        """Sanitized HTML notes, derived from ``summary``."""
        return render_notes(self.summary)

    @property
    def busy(self) -> bool:
        return self.state in _BUSY_STATES

    @property
    def can_submit(self) -> bool:
        return self.file is not None and not self.busy

    def select_file(self, path: str | Path) -> None:
        self._reset(Path(path))

    def clear_file(self) -> None:
        self._reset(None)

    def _reset(self, file: Optional[Path]) -> None:
        self.file = file
        self.state = SessionState.IDLE
        self.step = ""
        self.error = ""
        self.summary = ""

    def _enter(self, state: SessionState, step: str) -> None:
        logger.info("Session %s -> %s", self.state.value, state.value)
        self.state = state
        self.step = step

    def submit(self) -> SessionState:
        """Run one extraction + summarization attempt for the selected file."""
        if not self.can_submit:
            return self.state
        assert self.file is not None

        self.error = ""
        self.summary = ""
        try:
            self._enter(SessionState.EXTRACTING, STEP_EXTRACTING)
            text = self._extractor(self.file)
            logger.debug("Extracted %d chars from %s", len(text), self.file.name)

            self._enter(SessionState.REQUESTING, STEP_REQUESTING)
            summary = self._request_summary(text)
        except ClientError as e:
            logger.error("Upload failed: %s", e)
            self.error = str(e)
            self._enter(SessionState.FAILED, STEP_FAILED)
            return self.state

        self.summary = summary
        self._enter(SessionState.SUCCEEDED, STEP_SUCCEEDED)
        return self.state

    def _request_summary(self, text: str) -> str:
        try:
            response = self._http.post(self.gateway_url, json={"text": text})
        except httpx.HTTPError as e:
            raise RequestFailed(f"Could not reach the server: {e}") from e

        logger.debug("Gateway response status=%d", response.status_code)
        if not response.is_success:
            raw = response.text
            message = _error_message(_json_or_none(response))
            raise RequestFailed(message or f"Server error: {raw[:200]}")

        data = _json_or_none(response)
        if not isinstance(data, dict):
            raise RequestFailed(f"Unexpected response from server: {response.text[:200]}")
        if data.get("error"):
            raise RequestFailed(_error_message(data) or "Unexpected error")

        summary = data.get("summary")
        if not isinstance(summary, str):
            raise RequestFailed("Unexpected response from server: missing summary")
        return summary

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "NotesSession":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _error_message(data: Any) -> str:
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return ""


__all__ = ["NotesSession", "SessionState"]
