"""
Main Streamlit application for the YouTube summary helper.
"""

import os
import streamlit as st
from dotenv import load_dotenv

from app.frontend.api_client import ApiClient
from app.frontend.components import header, youtube_input, display_summary, display_error


load_dotenv()


def init_session_state():
    """Initialize session state variables."""
    if "api_client" not in st.session_state:
        st.session_state.api_client = ApiClient(os.getenv("API_URL", "http://localhost:8000"))


def main():
    header()
    init_session_state()

    url = youtube_input()
    if not url:
        return

    with st.spinner("분석 중..."):
        result = st.session_state.api_client.summarize_video(url)

    if result.get("success"):
        display_summary(result["summary"], result.get("method"))
    else:
        display_error(result["error"])


if __name__ == "__main__":
    main()
