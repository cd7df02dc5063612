"""
API routes for the YouTube summary helper application.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request

from app.api.schems import SummarizeRequest, SummaryResponse, HealthResponse
from app.config import config
from app.core.summarizer import GeminiSummarizer
from app.core.transcript_resolver import TranscriptResolver
from app.models.schemas import SummaryConfig
from app.utils.error_handling import (
    APIError,
    MissingURLError,
    SummaryGenerationError,
    TranscriptUnavailableError,
)
from app.utils.logger import logging

router = APIRouter(prefix="/api", tags=["youtube"])


def get_resolver(request: Request) -> TranscriptResolver:
    """Transcript resolver built at startup."""
    return request.app.state.resolver


def get_summarizer(request: Request) -> GeminiSummarizer:
    """
    Return the shared Gemini summarizer, building it on first use.

    Raises:
        ValueError: GEMINI_API_KEY is not configured
    """
    state = request.app.state
    if state.summarizer is None:
        with state.summarizer_lock:
            if state.summarizer is None:
                state.summarizer = GeminiSummarizer(
                    api_key=config.GEMINI_API_KEY,
                    config=SummaryConfig(),
                )
    return state.summarizer


def get_fallback_policy(request: Request) -> str:
    return getattr(request.app.state, "fallback_policy", config.FALLBACK_POLICY)


@router.post("/summarize", response_model=SummaryResponse, response_model_exclude_none=True)
def summarize_video(
    request: Request,
    payload: Optional[SummarizeRequest] = None,
    resolver: TranscriptResolver = Depends(get_resolver),
    fallback_policy: str = Depends(get_fallback_policy),
):
    """
    Summarize a YouTube video by URL.

    - Tries to extract the transcript and summarizes it
    - With the "video" fallback policy, sends the URL itself to Gemini
      when no transcript is available
    """
    if payload is None or not payload.url:
        raise MissingURLError()

    try:
        transcript = resolver.resolve(payload.url)

        if transcript.success:
            summary = get_summarizer(request).summarize_transcript(transcript.text)
            return SummaryResponse(summary=summary, method="transcript")

        if transcript.invalid_url or fallback_policy != "video":
            raise TranscriptUnavailableError(transcript.error or "자막을 가져올 수 없습니다")

        logging.info(f"No transcript for video {transcript.video_id}, falling back to video analysis")
        summary = get_summarizer(request).summarize_video(payload.url)
        return SummaryResponse(summary=summary, method="video")

    except APIError:
        raise
    except Exception as e:
        logging.exception(f"Error summarizing {payload.url}: {e}")
        raise SummaryGenerationError()


@router.get("/health", response_model=HealthResponse)
def health(request: Request):
    """Liveness check with the active model and fallback policy."""
    return HealthResponse(
        status="ok",
        model=config.GEMINI_MODEL,
        fallback_policy=get_fallback_policy(request),
    )
