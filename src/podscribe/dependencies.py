"""Dependency injection configuration for the podscribe service."""

from contextlib import contextmanager
from functools import lru_cache

import assemblyai as aai
import pika
from google import genai
from minio import Minio
from sqlmodel import Session, SQLModel, create_engine

from podscribe.config import AppConfig, load_config
from podscribe.domain import (
    Segmenter,
    SizePolicy,
    SummaryRequester,
    TranscriptAggregator,
    TranscriptionFanout,
)
from podscribe.handlers import TranscriptionJobHandler
from podscribe.infrastructure import (
    AssemblyAITranscriber,
    FfmpegSegmentationTool,
    GeminiLLMService,
    HttpAudioFetcher,
    MinioStorageClient,
    RabbitMQBroker,
)
from podscribe.infrastructure.interfaces import (
    JobRepository,
    MessageBroker,
    StorageClient,
)
from podscribe.logging import setup_logging
from podscribe.repositories import SqlJobRepository
from podscribe.worker import Worker

logger = setup_logging()


@lru_cache
def get_config() -> AppConfig:
    """Returns the configuration loaded from the environment."""
    return load_config()


@lru_cache
def get_storage() -> StorageClient:
    """Returns the configured storage client."""
    config = get_config().minio
    minio_client = Minio(
        endpoint=config.endpoint,
        access_key=config.user,
        secret_key=config.password,
        secure=False,
    )
    storage = MinioStorageClient(
        minio_client,
        bucket_name=config.bucket_name,
        endpoint=config.endpoint,
        public_base_url=config.public_base_url,
    )
    storage.ensure_bucket_exists()
    return storage


@lru_cache
def get_broker() -> MessageBroker:
    """Returns the configured message broker."""
    config = get_config().rabbitmq
    credentials = pika.PlainCredentials(config.user, config.password)
    parameters = pika.ConnectionParameters(
        host=config.host,
        credentials=credentials,
        heartbeat=0,
    )
    connection = pika.BlockingConnection(parameters)
    broker = RabbitMQBroker(connection.channel(), config)
    broker.setup()
    return broker


@lru_cache
def get_repository() -> JobRepository:
    """Returns the job repository backed by PostgreSQL."""
    engine = create_engine(get_config().postgres.url)
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialized", extra={"host": get_config().postgres.host})

    @contextmanager
    def session_factory():
        with Session(engine) as session:
            yield session

    return SqlJobRepository(session_factory)


def build_handler(config: AppConfig) -> TranscriptionJobHandler:
    """Wires the pipeline components into a job handler."""
    aai.settings.api_key = config.transcription.api_key
    aai.settings.http_timeout = config.transcription.http_timeout_seconds
    transcription_service = AssemblyAITranscriber(
        aai.Transcriber(),
        api_key=config.transcription.api_key,
        base_url=config.transcription.base_url,
        poll_interval_seconds=config.transcription.poll_interval_seconds,
        http_timeout_seconds=config.transcription.http_timeout_seconds,
    )

    llm = GeminiLLMService(
        genai.Client(api_key=config.summary.api_key),
        model_name=config.summary.model_name,
        system_prompt=config.summary.system_prompt,
        temperature=config.summary.temperature,
        timeout_seconds=config.summary.request_timeout_seconds,
    )
    aggregator = TranscriptAggregator(
        char_budget=config.summary.char_budget,
        min_first_chunk_chars=config.summary.min_first_chunk_chars,
        max_chunks_to_use=config.summary.max_chunks_to_use,
    )

    return TranscriptionJobHandler(
        fetcher=HttpAudioFetcher(),
        size_policy=SizePolicy(config.pipeline),
        segmenter=Segmenter(
            FfmpegSegmentationTool(config.pipeline.ffmpeg_path),
            segment_seconds=config.pipeline.segment_seconds,
        ),
        fanout=TranscriptionFanout(
            transcription_service,
            max_concurrency=config.transcription.max_concurrency,
            timeout_seconds=config.transcription.request_timeout_seconds,
            max_attempts=config.transcription.max_attempts,
            backoff_seconds=config.transcription.backoff_seconds,
        ),
        summary_requester=SummaryRequester(llm, aggregator),
        repository=get_repository(),
        temp_dir=config.pipeline.temp_dir,
        storage=get_storage() if config.minio.enabled else None,
    )


def get_worker() -> Worker:
    """Returns the configured worker."""
    config = get_config()
    return Worker(get_broker(), build_handler(config), config.rabbitmq)
