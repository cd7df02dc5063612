"""
YouTube Summary Helper Application.

This application takes a YouTube URL, retrieves the video's captions
and asks Gemini for a structured Korean summary.
"""

from app.config import config

__version__ = config.APP_VERSION
