"""
Podscribe transcription worker.

Entry point for the service that consumes transcription requests, splits
and transcribes the audio, and records title, summary and transcript.
"""

from ddtrace import patch_all

from podscribe.dependencies import get_worker
from podscribe.logging import setup_logging

patch_all()
logger = setup_logging()


def main():
    """Starts the worker."""
    logger.info("Starting podscribe worker")
    worker = get_worker()
    worker.start()


if __name__ == "__main__":
    main()
