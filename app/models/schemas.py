"""
Data models for the YouTube summary helper application.
"""
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field

from app.config import config


class OutcomeKind(str, Enum):
    """Why a single extraction strategy stopped."""
    OK = "ok"
    INSUFFICIENT_TEXT = "insufficient_text"
    EXTRACTION_ERROR = "extraction_error"


class StrategyOutcome(BaseModel):
    """Result of running one extraction strategy."""
    strategy: str
    kind: OutcomeKind
    text: str = ""
    error: Optional[str] = None

    @classmethod
    def ok(cls, strategy: str, text: str) -> "StrategyOutcome":
        return cls(strategy=strategy, kind=OutcomeKind.OK, text=text)

    @classmethod
    def insufficient_text(cls, strategy: str, text: str) -> "StrategyOutcome":
        return cls(strategy=strategy, kind=OutcomeKind.INSUFFICIENT_TEXT, text=text)

    @classmethod
    def extraction_error(cls, strategy: str, cause: Exception) -> "StrategyOutcome":
        return cls(strategy=strategy, kind=OutcomeKind.EXTRACTION_ERROR, error=str(cause) or type(cause).__name__)


class TranscriptResult(BaseModel):
    """Outcome of resolving a video URL to transcript text."""
    success: bool
    text: str = ""
    error: Optional[str] = None
    video_id: Optional[str] = None
    attempts: List[StrategyOutcome] = Field(default_factory=list)

    @property
    def invalid_url(self) -> bool:
        """True when the URL carried no recognizable video id."""
        return not self.success and self.video_id is None


class SummaryConfig(BaseModel):
    """Configuration for summarization operations."""
    model: str = config.GEMINI_MODEL
    temperature: float = config.SUMMARY_TEMPERATURE
    max_tokens: int = config.SUMMARY_MAX_TOKENS
