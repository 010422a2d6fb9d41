"""Error taxonomy for the gateway and the client session."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    EMPTY_INPUT = "EmptyInput"
    UPSTREAM_ERROR = "UpstreamError"
    EMPTY_UPSTREAM_RESULT = "EmptyUpstreamResult"
    INTERNAL_ERROR = "InternalError"


_STATUS_CODES = {
    ErrorKind.EMPTY_INPUT: 400,
    ErrorKind.UPSTREAM_ERROR: 502,
    ErrorKind.EMPTY_UPSTREAM_RESULT: 500,
    ErrorKind.INTERNAL_ERROR: 500,
}


class GatewayError(Exception):
    """Raised inside the gateway; rendered as an ``ErrorResponse`` body.

    Attributes:
        kind:    Which failure occurred.
        message: Human-readable message shown to the end user.
        details: Optional diagnostic text, e.g. the raw upstream body.
    """

    def __init__(self, kind: ErrorKind, message: str, details: Optional[str] = None) -> None:
        self.kind = kind
        self.message = message
        self.details = details
        super().__init__(f"{kind.value}: {message}")

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self.kind]


class ClientError(Exception):
    """Base class for failures surfaced by the client session."""


class ExtractionFailed(ClientError):
    """Raised when text cannot be extracted from the selected PDF."""


class RequestFailed(ClientError):
    """Raised when the gateway is unreachable or answers with an error."""
