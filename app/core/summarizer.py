"""
Module for summarizing transcripts and videos with Gemini.
"""

import os
from typing import Optional

from google import genai
from google.genai import types

from app.core.prompts import VIDEO_SUMMARY_PROMPT, build_transcript_prompt
from app.models.schemas import SummaryConfig
from app.utils.logger import logging


class SummarizationError(RuntimeError):
    """Raised when Gemini returns no usable text."""


class GeminiSummarizer:
    """Class to handle summarization requests against the Gemini API."""

    def __init__(self, api_key: Optional[str] = None, config: Optional[SummaryConfig] = None):
        """
        Initialize the summarizer with API key.

        Args:
            api_key: Gemini API key (if None, will try to get from environment)
            config: Model settings used for every request
        """
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise ValueError("Gemini API key is required. Set it in .env file or pass directly.")

        self.config = config or SummaryConfig()
        self.client = genai.Client(api_key=self.api_key)

    def _generation_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            temperature=self.config.temperature,
            max_output_tokens=self.config.max_tokens,
        )

    def _generate(self, contents) -> str:
        response = self.client.models.generate_content(
            model=self.config.model,
            contents=contents,
            config=self._generation_config(),
        )

        summary = response.text
        if not summary or not summary.strip():
            raise SummarizationError(f"Model {self.config.model} returned an empty response")
        return summary

    def summarize_transcript(self, transcript_text: str) -> str:
        """
        Summarize transcript text.

        Args:
            transcript_text: Full transcript text to summarize

        Returns:
            Summarized text
        """
        logging.info(f"Summarizing transcript of {len(transcript_text)} characters with {self.config.model}")
        return self._generate(build_transcript_prompt(transcript_text))

    def summarize_video(self, video_url: str) -> str:
        """
        Summarize a video by handing its URL to the model directly.

        Args:
            video_url: YouTube video URL

        Returns:
            Summarized text
        """
        logging.info(f"Summarizing video {video_url} directly with {self.config.model}")
        contents = types.Content(
            parts=[
                types.Part(text=VIDEO_SUMMARY_PROMPT),
                types.Part(
                    file_data=types.FileData(file_uri=video_url)
                )
            ]
        )
        return self._generate(contents)
