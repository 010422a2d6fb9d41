from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from study_notes.config import load_settings
from study_notes.errors import ErrorKind, GatewayError
from study_notes.inference import InferenceClient
from study_notes.models import ErrorResponse, SummaryResponse, UploadRequest
from study_notes.utils.logging import setup_logging


settings = load_settings()
setup_logging(Path(settings.logging.log_dir) if settings.logging.log_dir else None, settings.logging.level)
logger = logging.getLogger("study_notes.api")

inference_client = InferenceClient.from_settings(settings.inference)

app = FastAPI(title="Study Notes Generator")

api_router = APIRouter(prefix="/api")

EMPTY_INPUT_MESSAGE = "No text found to summarize."


def _error_response(exc: GatewayError) -> JSONResponse:
    body = ErrorResponse(message=exc.message, details=exc.details)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True))


@app.exception_handler(GatewayError)
async def _gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    logger.warning("%s %s -> %s (%d): %s", request.method, request.url.path, exc.kind.value, exc.status_code, exc.message)
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("%s %s -> invalid body: %s", request.method, request.url.path, exc.errors())
    return _error_response(GatewayError(ErrorKind.EMPTY_INPUT, EMPTY_INPUT_MESSAGE))


@api_router.get("/")
async def root():
    return {"message": "Study Notes Generator API"}


@api_router.post("/summarize", response_model=SummaryResponse)
async def summarize(req: UploadRequest) -> SummaryResponse:
    """Summarize extracted document text into study notes."""
    if not req.text or not req.text.strip():
        raise GatewayError(ErrorKind.EMPTY_INPUT, EMPTY_INPUT_MESSAGE)

    try:
        summary = await inference_client.summarize(req.text)
    except GatewayError:
        raise
    except Exception as e:
        logger.exception("Summarization failed")
        raise GatewayError(ErrorKind.INTERNAL_ERROR, str(e) or "Unexpected server error.") from e

    return SummaryResponse(summary=summary)


app.include_router(api_router)

app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_origins=settings.server.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
