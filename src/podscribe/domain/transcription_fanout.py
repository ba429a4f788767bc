"""Concurrent per-segment transcription."""

import asyncio

from podscribe.exceptions import TranscriptionError
from podscribe.infrastructure.interfaces import TranscriptionService
from podscribe.logging import setup_logging

from .models import Segment, TranscriptChunk

logger = setup_logging()


class TranscriptionFanout:
    """
    Transcribes all segments of an asset concurrently.

    At most ``max_concurrency`` requests are in flight at once; the rest wait
    on a semaphore. Each request is bounded by ``timeout_seconds`` and retried
    up to ``max_attempts`` times with exponential backoff. Results are stored
    by segment position, so the returned chunks follow segment order no
    matter which request finishes first.
    """

    def __init__(
        self,
        transcription_service: TranscriptionService,
        max_concurrency: int,
        timeout_seconds: float | None = None,
        max_attempts: int = 1,
        backoff_seconds: float = 1.0,
    ):
        self._service = transcription_service
        self._max_concurrency = max_concurrency
        self._timeout_seconds = timeout_seconds
        self._max_attempts = max_attempts
        self._backoff_seconds = backoff_seconds

    async def transcribe_all(self, segments: list[Segment]) -> list[TranscriptChunk]:
        """
        Transcribes every segment and returns chunks in segment order.

        Args:
            segments: Segments to transcribe.

        Returns:
            One TranscriptChunk per segment, sorted by ``segment_index``.

        Raises:
            TranscriptionError: As soon as any segment fails; in-flight and
                queued requests are cancelled.
        """
        ordered = sorted(segments, key=lambda s: s.index)
        semaphore = asyncio.Semaphore(self._max_concurrency)
        results: list[TranscriptChunk | None] = [None] * len(ordered)

        async def run(position: int, segment: Segment) -> None:
            async with semaphore:
                results[position] = await self._transcribe_segment(segment)

        tasks = [
            asyncio.create_task(run(position, segment))
            for position, segment in enumerate(ordered)
        ]
        try:
            await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        logger.info("All segments transcribed", extra={"segment_count": len(results)})
        return [chunk for chunk in results if chunk is not None]

    async def _transcribe_segment(self, segment: Segment) -> TranscriptChunk:
        """Transcribes one segment, retrying transient failures."""
        attempt = 0
        while True:
            attempt += 1
            try:
                output = await asyncio.wait_for(
                    self._service.transcribe(segment.file_path, segment.mime_type),
                    timeout=self._timeout_seconds,
                )
                return TranscriptChunk(
                    segment_index=segment.index,
                    text=output.text,
                    raw_result=output.raw,
                )
            except Exception as e:
                if attempt < self._max_attempts:
                    delay = self._backoff_seconds * 2 ** (attempt - 1)
                    logger.warning(
                        "Segment transcription failed, retrying",
                        extra={
                            "segment_index": segment.index,
                            "attempt": attempt,
                            "max_attempts": self._max_attempts,
                            "delay_seconds": delay,
                        },
                    )
                    await asyncio.sleep(delay)
                    continue
                logger.exception(
                    "Segment transcription failed",
                    extra={"segment_index": segment.index, "attempt": attempt},
                )
                cause = e.cause if isinstance(e, TranscriptionError) and e.cause else e
                if isinstance(e, asyncio.TimeoutError):
                    cause = TimeoutError(
                        f"no response after {self._timeout_seconds} seconds"
                    )
                raise TranscriptionError(
                    segment.file_path, cause, segment_index=segment.index
                ) from e
