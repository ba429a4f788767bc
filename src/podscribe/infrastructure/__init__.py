"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .ffmpeg_segmenter import FfmpegSegmentationTool
from .gemini_llm import GeminiLLMService
from .http_fetcher import HttpAudioFetcher
from .minio_storage import MinioStorageClient
from .rabbitmq_broker import RabbitMQBroker

__all__ = [
    "AssemblyAITranscriber",
    "FfmpegSegmentationTool",
    "GeminiLLMService",
    "HttpAudioFetcher",
    "MinioStorageClient",
    "RabbitMQBroker",
]
