"""
API client for communicating with the YouTube summary helper backend.
"""

import requests
from typing import Dict, Any
from urllib.parse import urljoin
from app.config import config

CONNECTION_FAILED_MESSAGE = "서버 연결에 실패했습니다"
SUMMARY_FAILED_MESSAGE = "요약에 실패했습니다"


class ApiClient:
    """Client for interacting with the YouTube summary helper API."""

    def __init__(self, base_url: str = config.PUBLIC_URL):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/")

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    def summarize_video(self, url: str) -> Dict[str, Any]:
        """
        Request a video summary.

        Args:
            url: YouTube video URL

        Returns:
            The API's JSON body; on any failure a dict with
            "success": False and an "error" message
        """
        try:
            response = requests.post(self._url("summarize"), json={"url": url})
        except requests.RequestException:
            return {"success": False, "error": CONNECTION_FAILED_MESSAGE}

        try:
            data = response.json()
        except ValueError:
            return {"success": False, "error": SUMMARY_FAILED_MESSAGE}

        if not data.get("success"):
            return {"success": False, "error": data.get("error") or SUMMARY_FAILED_MESSAGE}
        return data

    def health(self) -> Dict[str, Any]:
        """Fetch the API health status."""
        response = requests.get(self._url("health"))
        response.raise_for_status()
        return response.json()
