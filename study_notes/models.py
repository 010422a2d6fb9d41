from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, ValidationError


class UploadRequest(BaseModel):
    text: Optional[str] = None


class SummaryResponse(BaseModel):
    summary: str


class ErrorResponse(BaseModel):
    error: Literal[True] = True
    message: str
    details: Optional[str] = None


# Reply shapes of the inference service


class ChatMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: Optional[str] = None
    content: Optional[str] = None


class ChatReply(BaseModel):
    """Chat-style reply: ``{"message": {"content": ...}}``."""

    model_config = ConfigDict(extra="ignore")

    message: ChatMessage

    @property
    def text(self) -> str:
        return self.message.content or ""


class CompletionReply(BaseModel):
    """Flat completion reply: ``{"response": ...}``."""

    model_config = ConfigDict(extra="ignore")

    response: Optional[str] = None

    @property
    def text(self) -> str:
        return self.response or ""


REPLY_SHAPES: tuple[type[BaseModel], ...] = (ChatReply, CompletionReply)


def normalize_reply(payload: Any) -> str:
    """Return the generated text from whichever reply shape carries it.

    Shapes are tried in order; the first one that validates and holds
    non-blank text wins. Returns ``""`` when none does.
    """
    if not isinstance(payload, dict):
        return ""
    for shape in REPLY_SHAPES:
        try:
            reply = shape.model_validate(payload)
        except ValidationError:
            continue
        if reply.text.strip():
            return reply.text
    return ""
