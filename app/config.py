"""
Configuration settings for the YouTube summary helper application.
"""

import os
from typing import Dict, Any, List
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _split_languages(value: str) -> List[str]:
    return [code.strip() for code in value.split(",") if code.strip()]


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Summary Helper"
    APP_VERSION = "0.2.0"

    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()

    # API keys
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

    # Default models
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    SUMMARY_TEMPERATURE = float(os.getenv("SUMMARY_TEMPERATURE", "0.2"))
    SUMMARY_MAX_TOKENS = int(os.getenv("SUMMARY_MAX_TOKENS", "4096"))

    # "transcript": caption chain only, fail with 400 when nothing is found
    # "video": single transcript call, then hand the raw URL to Gemini
    FALLBACK_POLICY = os.getenv("FALLBACK_POLICY", "transcript").lower()
    TRANSCRIPT_LANGUAGES = _split_languages(os.getenv("TRANSCRIPT_LANGUAGES", "ko,en"))

    # Minimum accepted transcript lengths (inclusive)
    MIN_TRANSCRIPT_LENGTH = 10
    MIN_DIRECT_TRANSCRIPT_LENGTH = 101

    LOG_LEVEL = "INFO"

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        if not cls.GEMINI_API_KEY:
            print("WARNING: GEMINI_API_KEY environment variable not set.")
            print("Please set it in the .env file or environment variables.")

        if cls.FALLBACK_POLICY not in ("transcript", "video"):
            raise ValueError(
                f"FALLBACK_POLICY must be 'transcript' or 'video', got '{cls.FALLBACK_POLICY}'"
            )

    @classmethod
    def as_dict(cls) -> Dict[str, Any]:
        """Non-secret settings, suitable for logging or health output."""
        return {
            "app_name": cls.APP_NAME,
            "version": cls.APP_VERSION,
            "model": cls.GEMINI_MODEL,
            "fallback_policy": cls.FALLBACK_POLICY,
            "transcript_languages": cls.TRANSCRIPT_LANGUAGES,
        }


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
