"""
FastAPI application for the YouTube summary helper.
"""

import threading
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import config
from app.api.routes import router
from app.core.summarizer import GeminiSummarizer
from app.core.transcript_resolver import TranscriptResolver, build_resolver
from app.utils.error_handling import (
    APIError,
    api_error_handler,
    unhandled_error_handler,
    validation_error_handler,
)
from app.utils.logger import logging


def create_app(
    summarizer: Optional[GeminiSummarizer] = None,
    resolver: Optional[TranscriptResolver] = None,
    fallback_policy: Optional[str] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        summarizer: Summarizer to use; built from config on first request if None
        resolver: Transcript resolver; built for the fallback policy if None
        fallback_policy: "transcript" or "video"; defaults to config

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=config.APP_NAME,
        version=config.APP_VERSION,
        description="An API for summarizing YouTube videos from their transcripts",
    )

    app.state.fallback_policy = (fallback_policy or config.FALLBACK_POLICY).lower()
    app.state.resolver = resolver or build_resolver(app.state.fallback_policy)
    app.state.summarizer = summarizer
    app.state.summarizer_lock = threading.Lock()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def startup_event():
        """Log the active settings; the Gemini client is built on first use."""
        logging.info(f"Started {config.APP_NAME} v{config.APP_VERSION} with settings {config.as_dict()}")

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Middleware to add processing time header to responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        return response

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include API router
    app.include_router(router)

    @app.get("/")
    async def root():
        """Root endpoint returning basic API information."""
        return {
            "name": config.APP_NAME,
            "version": config.APP_VERSION,
            "description": "YouTube Summary Helper API",
        }

    return app


app = create_app()
