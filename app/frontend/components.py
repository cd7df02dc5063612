"""
Reusable UI components for the Streamlit app.
"""

import streamlit as st
from typing import Optional

METHOD_LABELS = {
    "transcript": "자막 분석",
    "video": "영상 분석",
}


def header():
    """Display the application header."""
    st.set_page_config(
        page_title="YouTube 영상 요약",
        page_icon="🎬",
        layout="centered",
    )

    st.title("YouTube 영상 요약")
    st.divider()


def youtube_input() -> Optional[str]:
    """
    Display a YouTube URL input form.

    Returns:
        The submitted YouTube URL or None
    """
    with st.form(key="youtube_form"):
        url = st.text_input(
            "YouTube URL",
            placeholder="YouTube URL을 입력하세요",
        )
        submit = st.form_submit_button("요약하기")

    if submit and url:
        return url.strip()

    return None


def display_summary(summary: str, method: Optional[str] = None):
    """Display a generated summary and how it was produced."""
    if method:
        st.caption(METHOD_LABELS.get(method, method))
    st.markdown(summary)


def display_error(message: str):
    """Display an error message."""
    st.error(f"❌ {message}")
