"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from podscribe.domain.models import TranscriptionOutput


class TranscriptionService(ABC):
    """Abstract base class for audio transcription backends."""

    @abstractmethod
    async def transcribe(self, file_path: str, mime_type: str) -> TranscriptionOutput:
        """
        Transcribes one audio file.

        Args:
            file_path: Path of the audio file to upload.
            mime_type: Media type of the file.

        Returns:
            TranscriptionOutput with the text and the provider's raw payload.

        Raises:
            TranscriptionError: If transcription fails.
        """
