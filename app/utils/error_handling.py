"""
Centralized error handling for the application.
"""

from typing import Any, Dict

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.utils.logger import logging

MISSING_URL_MESSAGE = "URL이 필요합니다"
SUMMARY_FAILED_MESSAGE = "요약 생성에 실패했습니다"


class APIError(Exception):
    """An error that maps directly to a JSON error response."""

    status_code = 400
    include_success = True

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {}
        if self.include_success:
            content["success"] = False
        content["error"] = self.message
        return content


class MissingURLError(APIError):
    """The request body carried no URL."""

    include_success = False

    def __init__(self):
        super().__init__(MISSING_URL_MESSAGE)


class TranscriptUnavailableError(APIError):
    """No transcript could be extracted, or the URL had no video id."""


class SummaryGenerationError(APIError):
    """Summarization failed; the cause is logged, never returned."""

    status_code = 500
    include_success = False

    def __init__(self):
        super().__init__(SUMMARY_FAILED_MESSAGE)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Render an APIError as its JSON body."""
    logging.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler for unhandled exceptions."""
    logging.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content=SummaryGenerationError().to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Map request validation failures onto the API's own error bodies.

    A body that is not valid JSON counts as a failed summary request (500),
    anything else (e.g. a non-string "url") as a missing URL (400).
    """
    errors = exc.errors()
    logging.info(f"{request.method} {request.url.path} rejected: {errors}")

    if any(error.get("type") == "json_invalid" for error in errors):
        error = SummaryGenerationError()
    else:
        error = MissingURLError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())
