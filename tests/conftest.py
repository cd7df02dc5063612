"""
Configuration for pytest tests.
"""

import os

# Settings are read when app.config is imported, so set them first
os.environ.setdefault("GEMINI_API_KEY", "test_api_key")
os.environ["FALLBACK_POLICY"] = "transcript"
os.environ["ENVIRONMENT"] = "development"

import pytest
from unittest.mock import MagicMock

from app.core.summarizer import GeminiSummarizer
from app.core.transcript_resolver import TranscriptStrategy


class StubStrategy(TranscriptStrategy):
    """Strategy returning canned text or raising, and counting calls."""

    def __init__(self, name, text="", error=None, min_length=10):
        super().__init__(min_length)
        self.name = name
        self.text = text
        self.error = error
        self.calls = []

    def fetch(self, video_id, session):
        self.calls.append(video_id)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def stub_strategy():
    """Factory for StubStrategy instances."""
    return StubStrategy


@pytest.fixture
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtube.com/watch?v=ABCDEFGHIJK"


@pytest.fixture
def long_transcript():
    """Roughly 500 characters of caption text."""
    return ("this is a caption line about testing the summary helper " * 9).strip()


@pytest.fixture
def mock_summarizer():
    """Summarizer double with canned responses."""
    summarizer = MagicMock(spec=GeminiSummarizer)
    summarizer.summarize_transcript.return_value = "주제\n테스트 영상 요약"
    summarizer.summarize_video.return_value = "주제\n영상 직접 분석 요약"
    return summarizer
