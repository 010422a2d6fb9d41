"""Client for the locally hosted inference service (Ollama-style ``/api/chat``).

``InferenceClient.summarize(text)`` performs one non-streamed chat call and
returns the generated notes, raising ``GatewayError`` for every upstream
failure the gateway reports to its callers.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

import httpx

from .config import InferenceSettings
from .errors import ErrorKind, GatewayError
from .models import normalize_reply


logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    "Summarize the following into concise study notes with bullet points and bold keywords:\n\n{text}"
)


def build_prompt(text: str) -> str:
    # Document text may contain braces; no format() here.
    return PROMPT_TEMPLATE.replace("{text}", text)


def build_payload(model: str, prompt: str) -> dict[str, Any]:
    return {
        "model": model,
        "stream": False,
        "messages": [{"role": "user", "content": prompt}],
    }


class InferenceClient:
    """Sends prompts to the inference service.

    A fresh ``httpx.AsyncClient`` is opened per call and the request has no
    timeout: it blocks until the service answers or the transport fails.
    """

    def __init__(
        self,
        url: str,
        model: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = url
        self.model = model
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: InferenceSettings) -> "InferenceClient":
        return cls(url=settings.url, model=settings.model)

    async def summarize(self, text: str) -> str:
        payload = build_payload(self.model, build_prompt(text))

        logger.info("Calling inference service model=%s url=%s input_chars=%d", self.model, self.url, len(text))
        start = time.perf_counter()
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
                response = await client.post(self.url, json=payload)
        except httpx.TransportError as e:
            logger.error("Inference service unreachable: %s", e)
            raise GatewayError(
                ErrorKind.UPSTREAM_ERROR,
                "Could not reach the inference service.",
                details=str(e) or type(e).__name__,
            ) from e

        elapsed_ms = (time.perf_counter() - start) * 1000.0
        if not response.is_success:
            logger.error("Inference service returned status=%d body=%s", response.status_code, response.text[:500])
            raise GatewayError(
                ErrorKind.UPSTREAM_ERROR,
                "Inference service responded with an error.",
                details=response.text,
            )

        summary = normalize_reply(response.json())
        if not summary.strip():
            logger.warning("Inference service returned an empty reply (%.1f ms)", elapsed_ms)
            raise GatewayError(ErrorKind.EMPTY_UPSTREAM_RESULT, "Inference service returned an empty summary.")

        logger.info("Inference reply received latency_ms=%.1f summary_chars=%d", elapsed_ms, len(summary))
        return summary
