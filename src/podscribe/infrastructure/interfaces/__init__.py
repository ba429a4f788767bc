"""Infrastructure interface exports."""

from .audio_fetcher import AudioFetcher
from .job_repository import JobRepository
from .llm_service import LLMService
from .message_broker import MessageBroker, MessagePublisher
from .segmentation_tool import SegmentationTool
from .storage import StorageClient
from .transcription_service import TranscriptionService

__all__ = [
    "AudioFetcher",
    "JobRepository",
    "LLMService",
    "MessageBroker",
    "MessagePublisher",
    "SegmentationTool",
    "StorageClient",
    "TranscriptionService",
]
