"""Segment, transcribe and summarize remote audio files."""

__version__ = "0.1.0"
