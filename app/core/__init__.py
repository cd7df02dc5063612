"""
Core functionality for the YouTube summary helper application.

This package contains modules for resolving video transcripts
and summarizing them with Gemini.
"""
