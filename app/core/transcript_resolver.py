"""
Module for resolving a YouTube URL to transcript text.

Extraction strategies are tried in a fixed order and the chain stops at
the first one that yields enough text. Failures inside a strategy are
recorded as typed outcomes on the result and never raised.
"""

import re
from typing import Iterable, List, Optional, Sequence

import requests
from pytubefix import YouTube
from youtube_transcript_api import YouTubeTranscriptApi, NoTranscriptFound

from app.config import config
from app.models.schemas import OutcomeKind, StrategyOutcome, TranscriptResult
from app.utils.logger import logging

INVALID_URL_ERROR = "Invalid YouTube URL"
TRANSCRIPT_UNAVAILABLE_ERROR = "자막을 가져올 수 없습니다"

VIDEO_ID_PATTERN = re.compile(r"(?:v=|/)([0-9A-Za-z_-]{11})")
TIMED_TEXT_PATTERN = re.compile(r"<text[^>]*>[^<]*</text>")
MARKUP_PATTERN = re.compile(r"<[^>]+>")

# &amp; goes last so "&amp;lt;" decodes to "&lt;" and not "<"
HTML_ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&#39;", "'"),
    ("&quot;", '"'),
    ("&amp;", "&"),
)


def extract_video_id(url: str) -> Optional[str]:
    """Extract the 11 character video ID from a YouTube URL."""
    match = VIDEO_ID_PATTERN.search(url or "")
    return match.group(1) if match else None


def unescape_entities(text: str) -> str:
    """Decode the five standard HTML entities used in timed-text payloads."""
    for entity, char in HTML_ENTITIES:
        text = text.replace(entity, char)
    return text


def join_segments(texts: Iterable[str]) -> str:
    """Join transcript fragments in order with single spaces."""
    return " ".join(text or "" for text in texts).strip()


def parse_timed_text(xml: str) -> str:
    """
    Extract caption text from a timed-text XML document.

    Args:
        xml: Raw caption document as served by a caption track URL

    Returns:
        The caption fragments joined with single spaces, entities decoded
    """
    fragments = [
        MARKUP_PATTERN.sub("", element).strip()
        for element in TIMED_TEXT_PATTERN.findall(xml)
    ]
    return unescape_entities(join_segments(fragments))


class TranscriptStrategy:
    """Base class for a single way of obtaining transcript text."""

    name = "strategy"

    def __init__(self, min_length: int = config.MIN_TRANSCRIPT_LENGTH):
        self.min_length = min_length

    def fetch(self, video_id: str, session: requests.Session) -> str:
        """Return whatever transcript text this strategy can find."""
        raise NotImplementedError

    def accepts(self, text: str) -> bool:
        return bool(text) and len(text) >= self.min_length


class TranscriptListStrategy(TranscriptStrategy):
    """Pick a transcript from the video's transcript list and fetch it."""

    name = "transcript_list"

    def __init__(
        self,
        languages: Sequence[str] = tuple(config.TRANSCRIPT_LANGUAGES),
        min_length: int = config.MIN_TRANSCRIPT_LENGTH,
    ):
        super().__init__(min_length)
        self.languages = list(languages)

    def fetch(self, video_id: str, session: requests.Session) -> str:
        api = YouTubeTranscriptApi(http_client=session)
        transcript_list = api.list(video_id)

        try:
            transcript = transcript_list.find_transcript(self.languages)
        except NoTranscriptFound:
            # Manually created transcripts are listed before generated ones
            transcript = next(iter(transcript_list), None)

        if transcript is None:
            return ""

        fetched = transcript.fetch()
        return join_segments(snippet.text for snippet in fetched)


class CaptionTrackStrategy(TranscriptStrategy):
    """Download the first caption track's timed-text document and parse it."""

    name = "caption_track"

    def fetch(self, video_id: str, session: requests.Session) -> str:
        yt = YouTube(f"https://www.youtube.com/watch?v={video_id}")
        tracks = yt.caption_tracks
        if not tracks:
            return ""

        response = session.get(tracks[0].url)
        response.raise_for_status()
        return parse_timed_text(response.text)


class DirectTranscriptStrategy(TranscriptStrategy):
    """Fetch a transcript in a single call and keep it only if it is long."""

    name = "direct_transcript"

    def __init__(
        self,
        languages: Sequence[str] = tuple(config.TRANSCRIPT_LANGUAGES),
        min_length: int = config.MIN_DIRECT_TRANSCRIPT_LENGTH,
    ):
        super().__init__(min_length)
        self.languages = list(languages)

    def fetch(self, video_id: str, session: requests.Session) -> str:
        api = YouTubeTranscriptApi(http_client=session)
        try:
            fetched = api.fetch(video_id, languages=self.languages)
        except NoTranscriptFound:
            # No preferred language; take the default track like a plain fetch would
            transcript = next(iter(api.list(video_id)), None)
            if transcript is None:
                return ""
            fetched = transcript.fetch()
        return join_segments(snippet.text for snippet in fetched)


class TranscriptResolver:
    """Class to run the transcript extraction fallback chain."""

    def __init__(self, strategies: Sequence[TranscriptStrategy]):
        """
        Initialize the resolver.

        Args:
            strategies: Strategies to try, in order
        """
        self.strategies: List[TranscriptStrategy] = list(strategies)

    def _new_session(self) -> requests.Session:
        return requests.Session()

    def _run_strategy(self, strategy: TranscriptStrategy, video_id: str, session: requests.Session) -> StrategyOutcome:
        try:
            text = strategy.fetch(video_id, session)
        except Exception as e:
            logging.warning(f"Strategy '{strategy.name}' failed for video {video_id}: {e}")
            return StrategyOutcome.extraction_error(strategy.name, e)

        if strategy.accepts(text):
            return StrategyOutcome.ok(strategy.name, text)

        logging.info(
            f"Strategy '{strategy.name}' returned {len(text or '')} characters for video {video_id}, "
            f"need at least {strategy.min_length}"
        )
        return StrategyOutcome.insufficient_text(strategy.name, text or "")

    def resolve(self, url: str) -> TranscriptResult:
        """
        Resolve a video URL to transcript text.

        Args:
            url: YouTube video URL

        Returns:
            TranscriptResult with the text of the first successful strategy
        """
        video_id = extract_video_id(url)
        if not video_id:
            return TranscriptResult(success=False, error=INVALID_URL_ERROR)

        attempts: List[StrategyOutcome] = []
        try:
            with self._new_session() as session:
                for strategy in self.strategies:
                    outcome = self._run_strategy(strategy, video_id, session)
                    attempts.append(outcome)
                    if outcome.kind == OutcomeKind.OK:
                        logging.info(
                            f"Transcript for video {video_id} found by '{strategy.name}' "
                            f"({len(outcome.text)} characters)"
                        )
                        return TranscriptResult(
                            success=True, text=outcome.text, video_id=video_id, attempts=attempts
                        )
        except Exception as e:
            logging.error(f"Transcript resolution failed for video {video_id}: {e}")
            return TranscriptResult(success=False, error=str(e), video_id=video_id, attempts=attempts)

        return TranscriptResult(
            success=False, error=TRANSCRIPT_UNAVAILABLE_ERROR, video_id=video_id, attempts=attempts
        )


def build_resolver(policy: Optional[str] = None) -> TranscriptResolver:
    """Build the strategy chain for a fallback policy."""
    policy = (policy or config.FALLBACK_POLICY).lower()
    if policy == "video":
        return TranscriptResolver([DirectTranscriptStrategy()])
    if policy == "transcript":
        return TranscriptResolver([TranscriptListStrategy(), CaptionTrackStrategy()])
    raise ValueError(f"Unknown fallback policy: {policy}")
