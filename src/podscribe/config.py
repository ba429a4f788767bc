"""Application configuration loaded from environment variables."""

import os
import tempfile

from pydantic import BaseModel, Field, computed_field

DEFAULT_SUPPORTED_CONTENT_TYPES = (
    "audio/mpeg",
    "audio/mp3",
    "audio/mp4",
    "audio/x-m4a",
    "audio/m4a",
    "audio/wav",
    "audio/x-wav",
    "audio/webm",
    "audio/ogg",
    "audio/flac",
    "video/mp4",
    "video/webm",
)


class PipelineConfig(BaseModel, frozen=True):
    """Admission, split and segmentation settings."""

    temp_dir: str = tempfile.gettempdir()
    supported_content_types: tuple[str, ...] = DEFAULT_SUPPORTED_CONTENT_TYPES
    max_file_size_bytes: int = Field(default=500_000_000, gt=0)
    split_threshold_bytes: int = Field(default=24_000_000, gt=0)
    segment_seconds: int = Field(default=60 * 20, gt=0)
    ffmpeg_path: str = "ffmpeg"


class TranscriptionConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration and fan-out limits."""

    api_key: str
    max_concurrency: int = Field(default=4, ge=1)
    request_timeout_seconds: float = Field(default=900.0, gt=0)
    max_attempts: int = Field(default=3, ge=1)
    backoff_seconds: float = Field(default=1.0, ge=0)
    base_url: str = "https://api.assemblyai.com"
    poll_interval_seconds: float = Field(default=3.0, gt=0)
    http_timeout_seconds: float = Field(default=300.0, gt=0)


class SummaryConfig(BaseModel, frozen=True):
    """Gemini LLM configuration and prompt budget."""

    api_key: str
    model_name: str = "gemini-2.5-flash-lite"
    system_prompt: str = "You are a helpful assistant."
    temperature: float = 0.7
    char_budget: int = Field(default=12_000, gt=0)
    min_first_chunk_chars: int = Field(default=4_000, gt=0)
    max_chunks_to_use: int = Field(default=6, ge=1)
    request_timeout_seconds: float = Field(default=120.0, gt=0)


class MinioConfig(BaseModel, frozen=True):
    """MinIO connection configuration."""

    endpoint: str
    user: str
    password: str
    bucket_name: str = "transcriptions"
    public_base_url: str | None = None
    enabled: bool = True


class QueueConfig(BaseModel, frozen=True):
    """RabbitMQ queue configuration."""

    name: str = "transcription_jobs_queue"
    queue_type: str = "quorum"
    max_delivery_count: int = 3
    expected_routing_key: str = "transcription.requested"
    success_routing_key: str = "transcription.completed"
    failure_routing_key: str = "transcription.failed"
    dlq_name: str = "dlq_transcription_jobs"
    dlq_exchange_name: str = "dead_letter_exchange"
    dlq_routing_key: str = "transcription.dead_lettered"


class RabbitMQConfig(BaseModel, frozen=True):
    """RabbitMQ connection configuration."""

    host: str
    user: str
    password: str
    exchange_name: str = "events"
    queue_config: QueueConfig = QueueConfig()


class PostgresConfig(BaseModel, frozen=True):
    """PostgreSQL connection configuration."""

    host: str
    user: str
    password: str
    port: int
    database: str

    @computed_field
    @property
    def url(self) -> str:
        """Returns the full PostgreSQL connection URL."""
        return (
            f"postgresql+psycopg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    pipeline: PipelineConfig
    transcription: TranscriptionConfig
    summary: SummaryConfig
    minio: MinioConfig
    rabbitmq: RabbitMQConfig
    postgres: PostgresConfig


def _env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = os.getenv(name)
    if not value:
        return default
    return tuple(item.strip() for item in value.split(",") if item.strip())


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        pipeline=PipelineConfig(
            temp_dir=os.getenv("TEMP_DIR", tempfile.gettempdir()),
            supported_content_types=_env_list(
                "SUPPORTED_CONTENT_TYPES", DEFAULT_SUPPORTED_CONTENT_TYPES
            ),
            max_file_size_bytes=int(os.getenv("MAX_FILE_SIZE_BYTES", "500000000")),
            split_threshold_bytes=int(os.getenv("SPLIT_THRESHOLD_BYTES", "24000000")),
            segment_seconds=int(os.getenv("SEGMENT_SECONDS", "1200")),
            ffmpeg_path=os.getenv("FFMPEG_PATH", "ffmpeg"),
        ),
        transcription=TranscriptionConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            max_concurrency=int(os.getenv("TRANSCRIPTION_MAX_CONCURRENCY", "4")),
            request_timeout_seconds=float(
                os.getenv("TRANSCRIPTION_TIMEOUT_SECONDS", "900")
            ),
            max_attempts=int(os.getenv("TRANSCRIPTION_MAX_ATTEMPTS", "3")),
            backoff_seconds=float(os.getenv("TRANSCRIPTION_BACKOFF_SECONDS", "1.0")),
            base_url=os.getenv("ASSEMBLYAI_BASE_URL", "https://api.assemblyai.com"),
            poll_interval_seconds=float(
                os.getenv("TRANSCRIPTION_POLL_INTERVAL_SECONDS", "3.0")
            ),
            http_timeout_seconds=float(
                os.getenv("ASSEMBLYAI_HTTP_TIMEOUT_SECONDS", "300")
            ),
        ),
        summary=SummaryConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL", "gemini-2.5-flash-lite"),
            system_prompt=os.getenv(
                "GEMINI_SYSTEM_PROMPT", "You are a helpful assistant."
            ),
            temperature=float(os.getenv("GEMINI_TEMPERATURE", "0.7")),
            char_budget=int(os.getenv("SUMMARY_CHAR_BUDGET", "12000")),
            min_first_chunk_chars=int(
                os.getenv("SUMMARY_MIN_FIRST_CHUNK_CHARS", "4000")
            ),
            max_chunks_to_use=int(os.getenv("SUMMARY_MAX_CHUNKS", "6")),
            request_timeout_seconds=float(os.getenv("GEMINI_TIMEOUT_SECONDS", "120")),
        ),
        minio=MinioConfig(
            endpoint=os.getenv("MINIO_ENDPOINT", "minio:9000"),
            user=os.getenv("MINIO_USER", ""),
            password=os.getenv("MINIO_PASSWORD", ""),
            bucket_name=os.getenv("MINIO_BUCKET", "transcriptions"),
            public_base_url=os.getenv("MINIO_PUBLIC_URL") or None,
            enabled=os.getenv("ARCHIVE_AUDIO", "true").lower() == "true",
        ),
        rabbitmq=RabbitMQConfig(
            host=os.getenv("RABBITMQ_HOST", "rabbitmq"),
            user=os.getenv("RABBITMQ_USER", ""),
            password=os.getenv("RABBITMQ_PASSWORD", ""),
        ),
        postgres=PostgresConfig(
            host=os.getenv("POSTGRES_HOST", "postgres"),
            user=os.getenv("POSTGRES_USER", ""),
            password=os.getenv("POSTGRES_PASSWORD", ""),
            port=int(os.getenv("POSTGRES_PORT", "5432")),
            database=os.getenv("POSTGRES_DB", "podscribe"),
        ),
    )
