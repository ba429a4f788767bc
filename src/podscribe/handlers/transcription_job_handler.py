"""Handler for processing transcription jobs."""

import asyncio
import mimetypes
import os
import shutil
import tempfile
import uuid

from podscribe.domain import (
    AudioAsset,
    JobOutcome,
    Segmenter,
    SizePolicy,
    SummaryRequester,
    TranscriptionFanout,
    TranscriptionJobMessage,
)
from podscribe.infrastructure.interfaces import (
    AudioFetcher,
    JobRepository,
    StorageClient,
)
from podscribe.logging import setup_logging

logger = setup_logging()

# Extensions ffmpeg needs to pick the right muxer for stream copy.
CONTENT_TYPE_EXTENSIONS = {
    "audio/mpeg": ".mp3",
    "audio/mp3": ".mp3",
    "audio/mpga": ".mp3",
    "audio/mp4": ".m4a",
    "audio/x-m4a": ".m4a",
    "audio/m4a": ".m4a",
    "audio/wav": ".wav",
    "audio/x-wav": ".wav",
    "audio/webm": ".webm",
    "audio/ogg": ".ogg",
    "audio/flac": ".flac",
    "video/mp4": ".mp4",
    "video/webm": ".webm",
}


class TranscriptionJobHandler:
    """Orchestrates fetch, segmentation, transcription and summarization of one job."""

    def __init__(
        self,
        fetcher: AudioFetcher,
        size_policy: SizePolicy,
        segmenter: Segmenter,
        fanout: TranscriptionFanout,
        summary_requester: SummaryRequester,
        repository: JobRepository,
        temp_dir: str,
        storage: StorageClient | None = None,
    ):
        self._fetcher = fetcher
        self._size_policy = size_policy
        self._segmenter = segmenter
        self._fanout = fanout
        self._summary_requester = summary_requester
        self._repository = repository
        self._temp_dir = temp_dir
        self._storage = storage

    async def process(self, message: TranscriptionJobMessage) -> JobOutcome:
        """
        Runs a transcription job to a terminal state and records it.

        Args:
            message: The job request with the audio location.

        Returns:
            The terminal JobOutcome (SUCCESS or FAILED) that was persisted.

        Raises:
            JobPersistenceError: If job state cannot be written.
        """
        logger.info(
            "Processing transcription job",
            extra={"job_id": message.job_id, "audio_url": message.audio_url},
        )
        await self._persist(message.job_id, JobOutcome.running())

        os.makedirs(self._temp_dir, exist_ok=True)
        job_dir = tempfile.mkdtemp(prefix="podscribe-", dir=self._temp_dir)
        try:
            outcome = await self._run(message, job_dir)
        except Exception as e:
            logger.exception(
                "Transcription job failed",
                extra={"job_id": message.job_id, "audio_url": message.audio_url},
            )
            outcome = JobOutcome.failed(str(e))
        finally:
            shutil.rmtree(job_dir, ignore_errors=True)

        await self._persist(message.job_id, outcome)

        logger.info(
            "Transcription job finished",
            extra={
                "job_id": message.job_id,
                "status": outcome.status.value,
                "segment_count": outcome.segment_count,
            },
        )
        return outcome

    async def _run(self, message: TranscriptionJobMessage, job_dir: str) -> JobOutcome:
        metadata = await self._fetcher.fetch_metadata(message.audio_url)
        self._size_policy.validate(metadata)

        mime_type = metadata.content_type.split(";", 1)[0].strip().lower()
        file_name = f"{uuid.uuid4().hex}{extension_for(mime_type)}"
        local_path = os.path.join(job_dir, file_name)

        byte_size = await self._fetcher.fetch_to_file(message.audio_url, local_path)
        self._size_policy.validate_local_size(byte_size)
        logger.info(
            "Audio downloaded",
            extra={
                "job_id": message.job_id,
                "reported_size": metadata.content_length,
                "local_size": byte_size,
            },
        )

        asset = AudioAsset(
            source_url=message.audio_url,
            local_path=local_path,
            byte_size=byte_size,
            mime_type=mime_type,
        )

        audio_url = None
        if self._storage is not None:
            audio_url = await asyncio.to_thread(
                self._storage.upload_file, local_path, file_name, mime_type
            )

        decision = self._size_policy.decide(asset.byte_size)
        segments = await self._segmenter.segment(asset, decision.split)

        chunks = await self._fanout.transcribe_all(segments)
        summary = await self._summary_requester.summarize([c.text for c in chunks])

        return JobOutcome.succeeded(chunks, summary, audio_url=audio_url)

    async def _persist(self, job_id: str, outcome: JobOutcome) -> None:
        await asyncio.to_thread(self._repository.update, job_id, outcome.to_fields())


def extension_for(content_type: str) -> str:
    """Returns a file extension for a content type, ``mpga`` mapped to ``.mp3``."""
    extension = CONTENT_TYPE_EXTENSIONS.get(content_type)
    if extension is None:
        extension = mimetypes.guess_extension(content_type) or ""
    return ".mp3" if extension == ".mpga" else extension
